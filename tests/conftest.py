"""Pytest configuration and fixtures."""

import os
import tempfile
from types import SimpleNamespace
from typing import Any

import pytest
from dotenv import load_dotenv

# Keep session logs out of the working tree; must be set before modules.logger is imported.
os.environ.setdefault("NBA_AGENT_LOG_DIR", tempfile.mkdtemp(prefix="nba_agent_logs_"))


@pytest.fixture(scope="session", autouse=True)
def load_env():
    """Load environment variables from .env file for all tests."""
    load_dotenv()


class StubJsonClient:
    """JsonClient returning canned payloads by path and recording requested paths."""

    def __init__(self, responses: dict[str, Any] | None = None, error: Exception | None = None):
        self.responses = responses or {}
        self.error = error
        self.paths: list[str] = []

    async def get_json(self, path: str) -> Any:
        self.paths.append(path)
        if self.error is not None:
            raise self.error
        return self.responses[path]


class FakeMessages:
    """Stands in for Anthropic().messages, replaying queued responses."""

    def __init__(self, responses: list[Any]):
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.responses.pop(0)


class FakeAnthropic:
    def __init__(self, responses: list[Any]):
        self.messages = FakeMessages(responses)


def text_block(text: str) -> SimpleNamespace:
    return SimpleNamespace(type="text", text=text)


def tool_use_block(name: str, tool_input: dict[str, Any], block_id: str = "toolu_1") -> SimpleNamespace:
    return SimpleNamespace(type="tool_use", name=name, input=tool_input, id=block_id)


def model_response(blocks: list[SimpleNamespace], stop_reason: str = "end_turn") -> SimpleNamespace:
    return SimpleNamespace(
        content=blocks,
        stop_reason=stop_reason,
        usage=SimpleNamespace(input_tokens=100, output_tokens=20),
    )


@pytest.fixture
def lal_bos_games() -> list[dict[str, Any]]:
    return [
        {"GameID": 1, "HomeTeam": "LAL", "AwayTeam": "GSW", "HomeTeamScore": 110, "AwayTeamScore": 102},
        {"GameID": 2, "HomeTeam": "BOS", "AwayTeam": "NYK", "HomeTeamScore": 99, "AwayTeamScore": 95},
        {"GameID": 3, "HomeTeam": "DEN", "AwayTeam": "LAL", "HomeTeamScore": 120, "AwayTeamScore": 118},
    ]
