#!/usr/bin/env python3
"""
Tool to fetch NBA games, standings, players and teams from SportsData.io.

Every call returns the same envelope regardless of category:
    {"success": bool, "message": str, "data": list | None}

Failures (missing API key, network errors, non-2xx responses, unexpected
payloads, unknown categories) never raise out of the tool; they come back as
{"success": False, "message": "Error: ...", "data": None}.

Example Usage:
    from tools.get_nba_data import get_nba_data

    # Today's Lakers games
    result = get_nba_data(category="games", team="LAL")

    # 2024 standings
    result = get_nba_data(category="standings", season="2024")
"""

import asyncio
from datetime import datetime
from typing import Any, ClassVar

from pydantic import ValidationError

from models.request import DataCategory, DataRequest, ResultEnvelope
from modules.config import SportsDataConfig
from modules.date_utils import current_season_year, today_utc
from modules.errors import DecodeError, FetchError, InvalidDataTypeError
from modules.logger import AgentLogger
from modules.sportsdata_client import JsonClient, SportsDataClient
from tools.base_tool import BaseTool

logger = AgentLogger.get_logger(__name__)

TEAMS_PATH = "teams"


def games_path(date: str) -> str:
    """Endpoint path for all games on a date (YYYY-MM-DD)."""
    return f"GamesByDate/{date}"


def standings_path(season: str) -> str:
    """Endpoint path for a season's standings."""
    return f"Standings/{season}"


def players_path(team: str | None = None) -> str:
    """Endpoint path for players, narrowed to one team when given."""
    return f"Players/{team}" if team else "Players"


def filter_games(games: list[dict[str, Any]], team: str | None) -> list[dict[str, Any]]:
    """Keep games where the team is home or away; no team keeps everything."""
    if not team:
        return games
    return [game for game in games if team in (game.get("HomeTeam"), game.get("AwayTeam"))]


def decode_records(payload: Any, record: str) -> list[dict[str, Any]]:
    """
    Check that a decoded body is a JSON array of record objects.

    Records are returned untouched; field values are not coerced.

    Args:
        payload: Decoded JSON body
        record: Record kind for error messages, e.g. 'Game'

    Returns:
        The records, as sent upstream

    Raises:
        DecodeError: If the payload is not an array of objects
    """
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of {record} records, got {type(payload).__name__}")

    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DecodeError(
                f"Expected {record} record objects, got {type(item).__name__} at index {index}"
            )

    return payload


async def get_nba_games(
    client: JsonClient,
    date: str | None = None,
    team: str | None = None,
    now: datetime | None = None,
) -> ResultEnvelope:
    """Games on a date (default today, UTC), optionally only those involving a team."""
    game_date = date or today_utc(now)

    try:
        payload = await client.get_json(games_path(game_date))
        games = filter_games(decode_records(payload, "Game"), team)
    except Exception as e:
        raise FetchError(f"Failed to fetch NBA games: {e}") from e

    involving = f" involving {team}" if team else ""
    return ResultEnvelope.ok(f"NBA games data for {game_date}{involving}", games)


async def get_nba_standings(
    client: JsonClient, season: str | None = None, now: datetime | None = None
) -> ResultEnvelope:
    """Standings for a season (default: current year)."""
    season_year = season or current_season_year(now)

    try:
        payload = await client.get_json(standings_path(season_year))
        standings = decode_records(payload, "Standing")
    except Exception as e:
        raise FetchError(f"Failed to fetch NBA standings: {e}") from e

    return ResultEnvelope.ok(f"NBA standings for {season_year} season", standings)


async def get_nba_players(client: JsonClient, team: str | None = None) -> ResultEnvelope:
    """Players, filtered by team on the server side when a team is given."""
    try:
        payload = await client.get_json(players_path(team))
        players = decode_records(payload, "Player")
    except Exception as e:
        raise FetchError(f"Failed to fetch NBA players: {e}") from e

    message = f"NBA players for {team}" if team else "All NBA players"
    return ResultEnvelope.ok(message, players)


async def get_nba_teams(client: JsonClient) -> ResultEnvelope:
    """All NBA teams."""
    try:
        payload = await client.get_json(TEAMS_PATH)
        teams = decode_records(payload, "Team")
    except Exception as e:
        raise FetchError(f"Failed to fetch NBA teams: {e}") from e

    return ResultEnvelope.ok("NBA teams", teams)


class NbaDataTool:
    """
    Dispatches data requests to the per-category fetchers.

    fetch_data() never raises: every failure becomes a failure envelope.
    """

    def __init__(self, client: JsonClient):
        """
        Initialize tool.

        Args:
            client: JSON client used for all upstream requests
        """
        self.client = client

    @classmethod
    def from_config(cls, config: SportsDataConfig | None = None) -> "NbaDataTool":
        """Build a tool backed by SportsDataClient (config defaults to the environment)."""
        return cls(SportsDataClient(config or SportsDataConfig.from_env()))

    async def fetch_data(self, request: DataRequest | dict[str, Any]) -> ResultEnvelope:
        """
        Fetch NBA data for a request.

        Args:
            request: DataRequest, or a dict with the same fields

        Returns:
            ResultEnvelope; success=False with an "Error: ..." message on any failure
        """
        try:
            if not isinstance(request, DataRequest):
                request = DataRequest.model_validate(request)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            logger.warning(f"Rejected NBA data request: {problems}")
            return ResultEnvelope.fail(f"Invalid request: {problems}")

        try:
            envelope = await self._dispatch(request)
        except Exception as e:
            logger.warning(f"NBA data request for '{request.category}' failed: {e}")
            return ResultEnvelope.fail(str(e))

        logger.info(f"{envelope.message} ({len(envelope.data)} records)")
        return envelope

    async def _dispatch(self, request: DataRequest) -> ResultEnvelope:
        try:
            category = DataCategory(request.category)
        except ValueError:
            raise InvalidDataTypeError(request.category) from None

        if category is DataCategory.GAMES:
            return await get_nba_games(self.client, date=request.date, team=request.team)
        elif category is DataCategory.STANDINGS:
            return await get_nba_standings(self.client, season=request.season)
        elif category is DataCategory.PLAYERS:
            return await get_nba_players(self.client, team=request.team)
        else:
            return await get_nba_teams(self.client)


class GetNbaData(BaseTool):
    """Tool wrapper exposing NbaDataTool to the model."""

    TOOL_DEFINITION: ClassVar[dict[str, Any]] = {
        "name": "get_nba_data",
        "description": "Get NBA data for teams, players, games, and standings from SportsData.io. Returns {success: bool, message: str, data: list|null}. games: all games on a date (default today, UTC), optionally only those involving a team. standings: team standings for a season (default current year). players: player details, optionally for one team. teams: conference, division and colors of every team.",
        "input_schema": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "enum": [c.value for c in DataCategory],
                    "description": "Type of NBA data to retrieve",
                },
                "date": {
                    "type": "string",
                    "description": "Date in YYYY-MM-DD format (for games data)",
                },
                "team": {
                    "type": "string",
                    "description": "Team abbreviation (e.g., LAL for Los Angeles Lakers)",
                },
                "season": {
                    "type": "string",
                    "description": "Season year (e.g., 2023 for 2023-2024 season)",
                },
            },
            "required": ["category"],
        },
    }

    @classmethod
    def run(
        cls,
        category: str | None = None,
        date: str | None = None,
        team: str | None = None,
        season: str | None = None,
    ) -> dict[str, Any]:
        """
        Fetch NBA data using configuration from the environment.

        Args:
            category: One of games, standings, players, teams
            date: Game date, YYYY-MM-DD (games)
            team: Team abbreviation (games, players)
            season: Season year (standings)

        Returns:
            Envelope dict with success, message and data
        """
        tool = NbaDataTool.from_config()
        request = {"category": category, "date": date, "team": team, "season": season}
        envelope = asyncio.run(tool.fetch_data(request))
        return envelope.model_dump(mode="json")


# Export for direct imports
TOOL_DEFINITION = GetNbaData.TOOL_DEFINITION
get_nba_data = GetNbaData.run


def main():
    """
    Test function to run the tool standalone.
    """
    print("Fetching NBA teams...\n")

    result = get_nba_data(category="teams")

    if result["success"]:
        print(f"✓ {result['message']}: {len(result['data'])} teams\n")
        for team in result["data"]:
            print(f"{team.get('Key', '?'):<5} {team.get('City', '')} {team.get('Name', '')}")
    else:
        print(f"✗ {result['message']}")


if __name__ == "__main__":
    main()
