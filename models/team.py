"""Team data models."""

from pydantic import BaseModel, Field


class Team(BaseModel):
    """An NBA franchise record from the teams endpoint."""

    team_id: int | None = Field(default=None, alias="TeamID")
    key: str | None = Field(default=None, alias="Key")
    city: str | None = Field(default=None, alias="City")
    name: str | None = Field(default=None, alias="Name")
    conference: str | None = Field(default=None, alias="Conference")
    division: str | None = Field(default=None, alias="Division")
    primary_color: str | None = Field(default=None, alias="PrimaryColor")
    secondary_color: str | None = Field(default=None, alias="SecondaryColor")
    tertiary_color: str | None = Field(default=None, alias="TertiaryColor")
    wikipedia_logo_url: str | None = Field(default=None, alias="WikipediaLogoUrl")

    class Config:
        populate_by_name = True
        extra = "allow"
