"""Tests for the SportsData.io HTTP client and its configuration."""

import logging
from types import SimpleNamespace

import pytest
import requests

from modules.config import DEFAULT_BASE_URL, SportsDataConfig
from modules.errors import ConfigurationError, DecodeError, UpstreamStatusError
from modules.sportsdata_client import API_KEY_HEADER, SportsDataClient


def fake_response(status_code=200, reason="OK", payload=None, bad_json=False):
    def _json():
        if bad_json:
            raise requests.JSONDecodeError("Expecting value", "<html>", 0)
        return payload

    return SimpleNamespace(
        ok=200 <= status_code < 300, status_code=status_code, reason=reason, json=_json
    )


@pytest.fixture
def recorded_get(monkeypatch):
    """Patch requests.get, recording calls and replying with the queued response."""
    calls = []
    state = {"response": fake_response(payload=[])}

    def _get(url, headers=None, timeout=None):
        calls.append({"url": url, "headers": headers, "timeout": timeout})
        return state["response"]

    monkeypatch.setattr(requests, "get", _get)
    return SimpleNamespace(calls=calls, state=state)


@pytest.mark.asyncio
async def test_get_json_sends_key_header_and_decodes(recorded_get):
    recorded_get.state["response"] = fake_response(payload=[{"TeamID": 1}])
    client = SportsDataClient(SportsDataConfig(api_key="secret", timeout=5))

    payload = await client.get_json("teams")

    assert payload == [{"TeamID": 1}]
    assert recorded_get.calls == [
        {
            "url": f"{DEFAULT_BASE_URL}/teams",
            "headers": {API_KEY_HEADER: "secret"},
            "timeout": 5,
        }
    ]


@pytest.mark.asyncio
async def test_get_json_non_2xx_raises_status_error(recorded_get):
    recorded_get.state["response"] = fake_response(status_code=401, reason="Access Denied")
    client = SportsDataClient(SportsDataConfig(api_key="wrong"))

    with pytest.raises(UpstreamStatusError) as exc_info:
        await client.get_json("Standings/2024")

    assert exc_info.value.status_code == 401
    assert str(exc_info.value) == "API request failed with status 401: Access Denied"


@pytest.mark.asyncio
async def test_get_json_invalid_body_raises_decode_error(recorded_get):
    recorded_get.state["response"] = fake_response(bad_json=True)
    client = SportsDataClient(SportsDataConfig(api_key="secret"))

    with pytest.raises(DecodeError):
        await client.get_json("teams")


@pytest.mark.asyncio
async def test_get_json_without_key_makes_no_request(recorded_get):
    client = SportsDataClient(SportsDataConfig(api_key=None))

    with pytest.raises(ConfigurationError, match="SPORTSDATA_API_KEY"):
        await client.get_json("teams")

    assert recorded_get.calls == []


@pytest.mark.asyncio
async def test_get_json_uses_injected_session():
    calls = []

    class Session:
        def get(self, url, headers=None, timeout=None):
            calls.append(url)
            return fake_response(payload=[])

    client = SportsDataClient(
        SportsDataConfig(api_key="secret", base_url="https://example.test/nba/"), session=Session()
    )

    assert await client.get_json("/Players/LAL") == []
    assert calls == ["https://example.test/nba/Players/LAL"]


@pytest.mark.asyncio
async def test_get_json_logs_request_at_info(recorded_get, caplog):
    client = SportsDataClient(SportsDataConfig(api_key="secret"))

    with caplog.at_level(logging.INFO, logger="modules.sportsdata_client"):
        await client.get_json("teams")

    records = [r for r in caplog.records if r.name == "modules.sportsdata_client"]
    assert [r.levelno for r in records] == [logging.INFO]
    assert records[0].getMessage() == f"GET {DEFAULT_BASE_URL}/teams"
    assert "secret" not in caplog.text


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SPORTSDATA_API_KEY", "from-env")
    monkeypatch.setenv("SPORTSDATA_BASE_URL", "https://example.test/v3/nba/scores/json")
    monkeypatch.setenv("SPORTSDATA_TIMEOUT", "2.5")

    config = SportsDataConfig.from_env()

    assert config.api_key == "from-env"
    assert config.base_url == "https://example.test/v3/nba/scores/json"
    assert config.timeout == 2.5
    assert config.require_api_key() == "from-env"


def test_config_empty_key_is_missing(monkeypatch):
    monkeypatch.setenv("SPORTSDATA_API_KEY", "")
    monkeypatch.setenv("SPORTSDATA_BASE_URL", "")
    monkeypatch.setenv("SPORTSDATA_TIMEOUT", "")

    config = SportsDataConfig.from_env()

    assert config.api_key is None
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == 10.0
    with pytest.raises(ConfigurationError):
        config.require_api_key()
