"""Standings data models."""

from pydantic import BaseModel, Field


class Standing(BaseModel):
    """One team's row in the season standings."""

    season_type: int | None = Field(default=None, alias="SeasonType")
    season: int | None = Field(default=None, alias="Season")
    team_id: int | None = Field(default=None, alias="TeamID")
    key: str | None = Field(default=None, alias="Key")
    city: str | None = Field(default=None, alias="City")
    name: str | None = Field(default=None, alias="Name")
    conference: str | None = Field(default=None, alias="Conference")
    division: str | None = Field(default=None, alias="Division")
    wins: int | None = Field(default=None, alias="Wins")
    losses: int | None = Field(default=None, alias="Losses")
    percentage: float | None = Field(default=None, alias="Percentage")
    conference_wins: int | None = Field(default=None, alias="ConferenceWins")
    conference_losses: int | None = Field(default=None, alias="ConferenceLosses")
    division_wins: int | None = Field(default=None, alias="DivisionWins")
    division_losses: int | None = Field(default=None, alias="DivisionLosses")

    class Config:
        populate_by_name = True
        extra = "allow"
