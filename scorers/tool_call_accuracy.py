"""Code scorer checking that the assistant used the expected tool."""

from models.scoring import ScoreResult, ScorerRun
from scorers.base import BaseScorer


class ToolCallAccuracyScorer(BaseScorer):
    """
    Scores 1.0 when the expected tool was called, else 0.0.

    In strict mode the run must contain exactly one tool call, and it must be
    the expected tool.
    """

    name = "Tool Call Accuracy"
    description = "Checks that the assistant fetched data with the expected tool"

    def __init__(self, expected_tool: str, strict_mode: bool = False):
        self.expected_tool = expected_tool
        self.strict_mode = strict_mode

    def score(self, run: ScorerRun) -> ScoreResult:
        calls = run.tool_calls

        if self.strict_mode:
            correct = calls == [self.expected_tool]
        else:
            correct = self.expected_tool in calls

        if correct:
            reason = f"Expected tool '{self.expected_tool}' was called"
        elif not calls:
            reason = f"No tools were called; expected '{self.expected_tool}'"
        elif self.strict_mode and self.expected_tool in calls:
            reason = f"Strict mode: expected only '{self.expected_tool}', got {calls}"
        else:
            reason = f"Expected tool '{self.expected_tool}' was not called (called: {calls})"

        return ScoreResult(
            scorer=self.name,
            score=1.0 if correct else 0.0,
            reason=reason,
            details={"tool_calls": calls, "strict_mode": self.strict_mode},
        )
