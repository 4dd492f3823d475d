"""Tool request and result envelope models."""

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_validator


class DataCategory(str, Enum):
    """Kinds of NBA data the upstream API serves."""

    GAMES = "games"
    STANDINGS = "standings"
    PLAYERS = "players"
    TEAMS = "teams"


class DataRequest(BaseModel):
    """A single request to the NBA data tool."""

    category: str = Field(
        description="Type of NBA data to retrieve (games, standings, players, teams)"
    )
    date: str | None = Field(
        default=None,
        description="Game date in YYYY-MM-DD format (games only, defaults to today)",
    )
    team: str | None = Field(
        default=None,
        description="Team abbreviation, e.g. 'LAL' (games and players only)",
    )
    season: str | None = Field(
        default=None,
        description="Season year, e.g. '2024' for the 2024-2025 season (standings only)",
    )

    class Config:
        json_schema_extra: ClassVar = {
            "example": {"category": "games", "date": "2024-12-25", "team": "LAL"}
        }


class ResultEnvelope(BaseModel):
    """Uniform result returned for every category, successful or not."""

    success: bool = Field(description="Whether the data was fetched")
    message: str = Field(description="Human-readable summary or failure description")
    data: Any | None = Field(default=None, description="Decoded payload, None on failure")

    @model_validator(mode="after")
    def check_failure_has_no_data(self) -> "ResultEnvelope":
        """A failed result never carries a payload."""
        if not self.success and self.data is not None:
            raise ValueError("Failed results must not carry data")
        return self

    @classmethod
    def ok(cls, message: str, data: Any) -> "ResultEnvelope":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, description: str) -> "ResultEnvelope":
        return cls(success=False, message=f"Error: {description}", data=None)
