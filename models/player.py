"""Player data models."""

from pydantic import BaseModel, Field


class Player(BaseModel):
    """An NBA player record from the Players endpoint."""

    player_id: int | None = Field(default=None, alias="PlayerID")
    status: str | None = Field(default=None, alias="Status")
    team_id: int | None = Field(default=None, alias="TeamID")
    team: str | None = Field(default=None, alias="Team")
    jersey: int | None = Field(default=None, alias="Jersey")
    position_category: str | None = Field(default=None, alias="PositionCategory")
    position: str | None = Field(default=None, alias="Position")
    first_name: str | None = Field(default=None, alias="FirstName")
    last_name: str | None = Field(default=None, alias="LastName")
    height: int | None = Field(default=None, alias="Height", description="Height in inches")
    weight: int | None = Field(default=None, alias="Weight", description="Weight in pounds")
    birth_date: str | None = Field(default=None, alias="BirthDate")

    class Config:
        populate_by_name = True
        extra = "allow"

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
