"""Models shared by the answer scorers."""

from typing import Any

from pydantic import BaseModel, Field


class ScorerRun(BaseModel):
    """Snapshot of one assistant turn, as seen by a scorer."""

    input_messages: list[dict[str, Any]] = Field(
        default_factory=list, description="User messages that started the turn"
    )
    output_messages: list[dict[str, Any]] = Field(
        default_factory=list, description="Assistant messages produced in the turn"
    )
    tool_calls: list[str] = Field(
        default_factory=list, description="Names of tools called, in call order"
    )

    @property
    def user_text(self) -> str:
        return _first_content(self.input_messages)

    @property
    def assistant_text(self) -> str:
        return _first_content(self.output_messages)


class ScoreResult(BaseModel):
    """Outcome of a scorer on a single run."""

    scorer: str
    score: float = Field(ge=0.0, le=1.0)
    reason: str = ""
    details: dict[str, Any] = Field(default_factory=dict)


def _first_content(messages: list[dict[str, Any]]) -> str:
    if not messages:
        return ""
    content = messages[0].get("content", "")
    return content if isinstance(content, str) else ""
