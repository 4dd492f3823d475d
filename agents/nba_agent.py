"""NBA assistant: instructions, tools and attached scorers."""

import logging
import os
import random
from typing import Any

from anthropic import Anthropic
from pydantic import BaseModel, Field

from models.scoring import ScoreResult, ScorerRun
from modules.agent_orchestrator import DEFAULT_MODEL, AgentOrchestrator
from modules.system_prompt_builder import SystemPromptBuilder
from nba_tools import TOOL_FUNCTIONS, TOOLS
from scorers import BaseScorer, CompletenessScorer, DataQualityScorer, ToolCallAccuracyScorer

logger = logging.getLogger(__name__)

AGENT_NAME = "NBA Agent"

INSTRUCTIONS = """You are a helpful NBA assistant that provides accurate basketball information about teams, players, games, and standings.

Your primary function is to help users get NBA data. When responding:
- Always ask for specifics if the user's query is too general (e.g., which team, player, date, or season)
- Provide context and insights along with raw data
- Present statistics in an easy-to-understand format
- For games data, include the score, date, and team information
- For player data, highlight key stats and achievements
- For team data, include conference, division, and recent performance
- For standings, explain the team's position in their conference/division
- Keep responses concise but informative

Use the get_nba_data tool to fetch NBA data with the following categories:
- games: Get information about games (can filter by date and team)
- standings: Get team standings (can filter by season)
- players: Get player information (can filter by team)
- teams: Get details about NBA teams

If the tool returns success=false, tell the user the data is unavailable and why; do not invent numbers."""


class AttachedScorer(BaseModel):
    """A scorer run on a sampled fraction of answers."""

    scorer: BaseScorer
    sampling_rate: float = Field(default=1.0, ge=0.0, le=1.0)

    class Config:
        arbitrary_types_allowed = True


class AgentAnswer(BaseModel):
    """The assistant's answer to one question, with any scores it received."""

    question: str
    text: str
    tool_calls: list[str] = Field(default_factory=list)
    scores: list[ScoreResult] = Field(default_factory=list)


def default_scorers(client: Anthropic | Any) -> dict[str, AttachedScorer]:
    """The scorers attached to the assistant by default, each sampled on every answer."""
    return {
        "tool_call_appropriateness": AttachedScorer(
            scorer=ToolCallAccuracyScorer(expected_tool="get_nba_data", strict_mode=False)
        ),
        "completeness": AttachedScorer(scorer=CompletenessScorer()),
        "data_quality": AttachedScorer(scorer=DataQualityScorer(client)),
    }


class NbaAgent:
    """
    Conversational NBA assistant.

    Answers questions through AgentOrchestrator, then grades each answer with
    the attached scorers whose sampling draw passes.
    """

    def __init__(
        self,
        client: Anthropic | Any,
        model: str | None = None,
        scorers: dict[str, AttachedScorer] | None = None,
        tools: list[dict[str, Any]] | None = None,
        tool_functions: dict[str, Any] | None = None,
        rng: random.Random | None = None,
        verbose: bool = True,
    ):
        """
        Initialize NbaAgent.

        Args:
            client: Anthropic client
            model: Model name (defaults to NBA_AGENT_MODEL or the orchestrator default)
            scorers: Attached scorers by key (defaults to default_scorers(client))
            tools: Tool definitions (defaults to nba_tools.TOOLS)
            tool_functions: Tool implementations (defaults to nba_tools.TOOL_FUNCTIONS)
            rng: Random source for scorer sampling
            verbose: Log each model call and tool call
        """
        self.name = AGENT_NAME
        self.model = model or os.getenv("NBA_AGENT_MODEL", DEFAULT_MODEL)
        self.scorers = default_scorers(client) if scorers is None else scorers
        self.rng = rng or random.Random()

        self.orchestrator = AgentOrchestrator(
            client=client,
            system_blocks=SystemPromptBuilder(INSTRUCTIONS).build(),
            tools=TOOLS if tools is None else tools,
            tool_functions=TOOL_FUNCTIONS if tool_functions is None else tool_functions,
            model=self.model,
            verbose=verbose,
        )

    def ask(self, question: str, score: bool = True) -> AgentAnswer:
        """
        Answer a question, continuing the current conversation.

        Args:
            question: User question
            score: Run the attached scorers on the answer

        Returns:
            AgentAnswer with text, tools called and score results
        """
        turn = self.orchestrator.ask(question)
        answer = AgentAnswer(question=question, text=turn.text, tool_calls=turn.tool_calls)

        if score:
            run = ScorerRun(
                input_messages=[{"role": "user", "content": question}],
                output_messages=[{"role": "assistant", "content": turn.text}],
                tool_calls=turn.tool_calls,
            )
            answer.scores = self.run_scorers(run)

        return answer

    def run_scorers(self, run: ScorerRun) -> list[ScoreResult]:
        """
        Run each attached scorer whose sampling draw passes.

        A scorer that raises is logged and skipped.
        """
        results = []

        for key, attached in self.scorers.items():
            if self.rng.random() >= attached.sampling_rate:
                logger.debug(f"Scorer '{key}' not sampled for this answer")
                continue

            try:
                result = attached.scorer.score(run)
            except Exception as e:
                logger.warning(f"Scorer '{key}' failed: {e}")
                continue

            logger.info(f"[{result.scorer}] score={result.score:.2f} {result.reason}")
            results.append(result)

        return results

    def reset(self) -> None:
        """Forget the conversation so far."""
        self.orchestrator.reset()
