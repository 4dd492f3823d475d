"""Tests for the NBA data tool."""

from datetime import datetime, timezone

import pytest
from conftest import StubJsonClient

from modules.config import SportsDataConfig
from modules.date_utils import current_season_year, today_utc
from modules.errors import DecodeError, UpstreamStatusError
from modules.sportsdata_client import SportsDataClient
from tools.get_nba_data import (
    TOOL_DEFINITION,
    NbaDataTool,
    decode_records,
    filter_games,
    games_path,
    get_nba_data,
    get_nba_games,
    get_nba_players,
    get_nba_standings,
    get_nba_teams,
    players_path,
    standings_path,
)

CHRISTMAS = datetime(2024, 12, 25, 20, 0, tzinfo=timezone.utc)

STANDINGS = [
    {"TeamID": 1, "Key": "BOS", "Conference": "Eastern", "Wins": 64, "Losses": 18, "Percentage": 0.78},
    {"TeamID": 2, "Key": "LAL", "Conference": "Western", "Wins": 47, "Losses": 35, "Percentage": 0.573},
]
PLAYERS = [
    {"PlayerID": 20000441, "Team": "LAL", "FirstName": "LeBron", "LastName": "James", "Jersey": 23},
]
TEAMS = [{"TeamID": 1, "Key": "LAL", "City": "Los Angeles", "Name": "Lakers"}]


def test_endpoint_paths():
    """Endpoint builders interpolate the resolved parameters."""
    assert games_path("2024-12-25") == "GamesByDate/2024-12-25"
    assert standings_path("2024") == "Standings/2024"
    assert players_path("LAL") == "Players/LAL"
    assert players_path() == "Players"
    assert players_path(None) == "Players"


def test_filter_games_keeps_home_or_away_matches(lal_bos_games):
    lal = filter_games(lal_bos_games, "LAL")

    assert [g["GameID"] for g in lal] == [1, 3]
    assert all("LAL" in (g["HomeTeam"], g["AwayTeam"]) for g in lal)


def test_filter_games_without_team_returns_everything(lal_bos_games):
    assert filter_games(lal_bos_games, None) == lal_bos_games
    assert filter_games(lal_bos_games, "") == lal_bos_games


def test_filter_games_unknown_team_returns_empty(lal_bos_games):
    assert filter_games(lal_bos_games, "XYZ") == []


def test_decode_records_rejects_non_array():
    with pytest.raises(DecodeError, match="Expected a JSON array"):
        decode_records({"Games": []}, "Game")


def test_decode_records_rejects_non_object_items():
    with pytest.raises(DecodeError, match="index 1"):
        decode_records([{"GameID": 1}, "not a game"], "Game")


def test_decode_records_returns_records_untouched():
    payload = [{"TeamID": "1", "Key": "LAL"}, {"PlayerID": 7, "Height": 80.5, "Nickname": None}]

    assert decode_records(payload, "Team") is payload


@pytest.mark.asyncio
async def test_games_with_team_filter(lal_bos_games):
    """Only games involving the team are returned, and the message names date and team."""
    client = StubJsonClient({"GamesByDate/2024-12-25": lal_bos_games})

    result = await get_nba_games(client, date="2024-12-25", team="LAL")

    assert result.success is True
    assert result.message == "NBA games data for 2024-12-25 involving LAL"
    assert result.data == [lal_bos_games[0], lal_bos_games[2]]


@pytest.mark.asyncio
async def test_games_without_team_returns_all(lal_bos_games):
    client = StubJsonClient({"GamesByDate/2024-12-25": lal_bos_games})

    result = await get_nba_games(client, date="2024-12-25")

    assert result.message == "NBA games data for 2024-12-25"
    assert result.data == lal_bos_games


@pytest.mark.asyncio
async def test_games_default_to_today():
    client = StubJsonClient({"GamesByDate/2024-12-25": []})

    result = await get_nba_games(client, now=CHRISTMAS)

    assert client.paths == ["GamesByDate/2024-12-25"]
    assert result.success is True
    assert result.data == []


@pytest.mark.asyncio
async def test_standings_default_to_current_year():
    client = StubJsonClient({"Standings/2024": STANDINGS})

    result = await get_nba_standings(client, now=CHRISTMAS)

    assert client.paths == ["Standings/2024"]
    assert result.message == "NBA standings for 2024 season"
    assert result.data == STANDINGS


@pytest.mark.asyncio
async def test_players_team_filter_goes_to_the_endpoint():
    """The team is part of the path; the payload is returned as-is."""
    mixed = PLAYERS + [{"PlayerID": 1, "Team": "BOS", "FirstName": "Jayson", "LastName": "Tatum"}]
    client = StubJsonClient({"Players/LAL": mixed})

    result = await get_nba_players(client, team="LAL")

    assert client.paths == ["Players/LAL"]
    assert result.message == "NBA players for LAL"
    assert result.data == mixed


@pytest.mark.asyncio
async def test_all_players():
    client = StubJsonClient({"Players": PLAYERS})

    result = await get_nba_players(client)

    assert result.message == "All NBA players"
    assert result.data == PLAYERS


@pytest.mark.asyncio
async def test_teams():
    client = StubJsonClient({"teams": TEAMS})

    result = await get_nba_teams(client)

    assert result.model_dump() == {"success": True, "message": "NBA teams", "data": TEAMS}


@pytest.mark.asyncio
async def test_fetch_data_teams_example():
    tool = NbaDataTool(StubJsonClient({"teams": TEAMS}))

    result = await tool.fetch_data({"category": "teams"})

    assert result.success is True
    assert result.message == "NBA teams"
    assert result.data == TEAMS


@pytest.mark.asyncio
async def test_fetch_data_passes_records_through_unchanged():
    """Field values reach the caller exactly as sent, even when their types are unexpected."""
    teams = [{"TeamID": "1", "Key": "LAL"}]
    players = PLAYERS + [{"PlayerID": 2, "Team": "LAL", "Height": 80.5, "Jersey": "23"}]
    tool = NbaDataTool(StubJsonClient({"teams": teams, "Players/LAL": players}))

    team_result = await tool.fetch_data({"category": "teams"})
    player_result = await tool.fetch_data({"category": "players", "team": "LAL"})

    assert team_result.success is True
    assert team_result.data == teams
    assert team_result.data[0]["TeamID"] == "1"
    assert player_result.success is True
    assert player_result.data == players
    assert player_result.data[1]["Height"] == 80.5


@pytest.mark.asyncio
async def test_fetch_data_games_for_team(lal_bos_games):
    today = today_utc()
    tool = NbaDataTool(StubJsonClient({f"GamesByDate/{today}": lal_bos_games}))

    result = await tool.fetch_data({"category": "games", "team": "LAL"})

    assert result.success is True
    assert today in result.message
    assert "LAL" in result.message
    assert [g["GameID"] for g in result.data] == [1, 3]


@pytest.mark.asyncio
async def test_fetch_data_standings_default_season():
    season = current_season_year()
    client = StubJsonClient({f"Standings/{season}": STANDINGS})

    result = await NbaDataTool(client).fetch_data({"category": "standings"})

    assert client.paths == [f"Standings/{season}"]
    assert result.success is True


@pytest.mark.asyncio
async def test_fetch_data_teams_ignores_filters():
    client = StubJsonClient({"teams": TEAMS})

    result = await NbaDataTool(client).fetch_data(
        {"category": "teams", "team": "BOS", "season": "1999", "date": "2020-01-01"}
    )

    assert client.paths == ["teams"]
    assert result.data == TEAMS


@pytest.mark.asyncio
async def test_fetch_data_invalid_category():
    client = StubJsonClient()

    result = await NbaDataTool(client).fetch_data({"category": "bogus"})

    assert result.success is False
    assert result.data is None
    assert result.message == "Error: Invalid data type: bogus"
    assert client.paths == []


@pytest.mark.asyncio
async def test_fetch_data_missing_category():
    result = await NbaDataTool(StubJsonClient()).fetch_data({"team": "LAL"})

    assert result.success is False
    assert result.data is None
    assert result.message.startswith("Error: Invalid request")
    assert "category" in result.message


@pytest.mark.asyncio
@pytest.mark.parametrize("category", ["games", "standings", "players", "teams"])
async def test_fetch_data_status_error_for_every_category(category):
    client = StubJsonClient(error=UpstreamStatusError(503, "Service Unavailable"))

    result = await NbaDataTool(client).fetch_data({"category": category})

    assert result.success is False
    assert result.data is None
    assert "503" in result.message
    assert result.message == (
        f"Error: Failed to fetch NBA {category}: "
        "API request failed with status 503: Service Unavailable"
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("category", ["games", "standings", "players", "teams"])
async def test_fetch_data_missing_api_key_for_every_category(category, monkeypatch):
    """No key means failure for every category, before any HTTP request."""
    sent = []
    monkeypatch.setattr("requests.get", lambda *args, **kwargs: sent.append(args))
    tool = NbaDataTool(SportsDataClient(SportsDataConfig(api_key=None)))

    result = await tool.fetch_data({"category": category})

    assert result.success is False
    assert result.data is None
    assert "SPORTSDATA_API_KEY" in result.message
    assert sent == []


@pytest.mark.asyncio
async def test_fetch_data_network_error():
    client = StubJsonClient(error=ConnectionError("connection refused"))

    result = await NbaDataTool(client).fetch_data({"category": "teams"})

    assert result.success is False
    assert result.message == "Error: Failed to fetch NBA teams: connection refused"


@pytest.mark.asyncio
async def test_fetch_data_decode_error():
    client = StubJsonClient({"Standings/2023": {"message": "not a list"}})

    result = await NbaDataTool(client).fetch_data({"category": "standings", "season": "2023"})

    assert result.success is False
    assert result.data is None
    assert "Expected a JSON array" in result.message


def test_tool_definition_schema():
    schema = TOOL_DEFINITION["input_schema"]

    assert TOOL_DEFINITION["name"] == "get_nba_data"
    assert schema["required"] == ["category"]
    assert schema["properties"]["category"]["enum"] == ["games", "standings", "players", "teams"]
    assert set(schema["properties"]) == {"category", "date", "team", "season"}


def test_sync_entry_point_returns_envelope_dict(monkeypatch):
    """Without an API key the synchronous wrapper returns a failure dict."""
    monkeypatch.setenv("SPORTSDATA_API_KEY", "")

    result = get_nba_data(category="teams")

    assert result == {
        "success": False,
        "message": "Error: Failed to fetch NBA teams: SPORTSDATA_API_KEY environment variable is not set",
        "data": None,
    }


def test_sync_entry_point_without_category_returns_envelope(monkeypatch):
    """A tool call missing its category gets a failure envelope, not a TypeError."""
    monkeypatch.setenv("SPORTSDATA_API_KEY", "")

    result = get_nba_data(team="LAL")

    assert result["success"] is False
    assert result["data"] is None
    assert result["message"].startswith("Error: Invalid request: category")
