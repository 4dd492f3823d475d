"""Game data models."""

from pydantic import BaseModel, Field


class Game(BaseModel):
    """A single NBA game as returned by the GamesByDate endpoint."""

    game_id: int | None = Field(default=None, alias="GameID")
    season: int | None = Field(default=None, alias="Season")
    season_type: int | None = Field(default=None, alias="SeasonType")
    status: str | None = Field(default=None, alias="Status")
    day: str | None = Field(default=None, alias="Day")
    date_time: str | None = Field(default=None, alias="DateTime")
    away_team: str | None = Field(default=None, alias="AwayTeam")
    home_team: str | None = Field(default=None, alias="HomeTeam")
    away_team_id: int | None = Field(default=None, alias="AwayTeamID")
    home_team_id: int | None = Field(default=None, alias="HomeTeamID")
    away_team_score: int | None = Field(default=None, alias="AwayTeamScore")
    home_team_score: int | None = Field(default=None, alias="HomeTeamScore")

    class Config:
        populate_by_name = True
        extra = "allow"

    def involves(self, team: str) -> bool:
        """True if the team played this game, home or away."""
        return self.home_team == team or self.away_team == team

    def __str__(self) -> str:
        score = ""
        if self.away_team_score is not None and self.home_team_score is not None:
            score = f" ({self.away_team_score}-{self.home_team_score})"
        return f"{self.away_team} @ {self.home_team}{score}"
