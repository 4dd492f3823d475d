"""LLM-judged scorer for how well NBA data is presented."""

import logging
import os
from typing import Any

from anthropic import Anthropic
from pydantic import BaseModel, Field

from models.scoring import ScoreResult, ScorerRun
from scorers.base import BaseScorer

logger = logging.getLogger(__name__)

DEFAULT_JUDGE_MODEL = "claude-opus-4-1"

JUDGE_INSTRUCTIONS = (
    "You are an expert evaluator of sports data presentation quality. "
    "Determine whether the assistant provides NBA data in a clear, structured format with relevant context. "
    "Check that the assistant explains key stats and provides appropriate insights. "
    "Return only the structured JSON matching the provided schema."
)

ANALYSIS_PROMPT = """You are evaluating if an NBA assistant properly presents basketball data.
User text:
\"\"\"
{user_text}
\"\"\"
Assistant response:
\"\"\"
{assistant_text}
\"\"\"
Tasks:
1) Identify if the assistant presents NBA-related data in response to the user's query.
2) Check if the data is well-structured and easy to understand.
3) Determine if the assistant provides relevant context or insights about the data.
Return JSON with fields:
{{
  "containsNbaData": boolean,
  "wellStructured": boolean,
  "providesContext": boolean,
  "confidence": number, // 0-1
  "explanation": string
}}"""


class DataQualityAnalysis(BaseModel):
    """Judge verdict on one answer."""

    contains_nba_data: bool = Field(alias="containsNbaData")
    well_structured: bool = Field(alias="wellStructured")
    provides_context: bool = Field(alias="providesContext")
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    explanation: str = ""

    class Config:
        populate_by_name = True


def parse_analysis(text: str) -> DataQualityAnalysis:
    """
    Parse the judge's reply, tolerating prose or code fences around the JSON.

    Raises:
        ValueError: If the reply contains no JSON object or it does not match the schema
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ValueError(f"Judge reply contains no JSON object: {text[:200]!r}")
    return DataQualityAnalysis.model_validate_json(text[start : end + 1])


def compute_score(analysis: DataQualityAnalysis) -> float:
    """Answers without NBA data get 0.5; otherwise structure and context each earn half."""
    if not analysis.contains_nba_data:
        return 0.5

    score = 0.0
    if analysis.well_structured:
        score += 0.5
    if analysis.provides_context:
        score += 0.5

    return min(1.0, score * analysis.confidence)


def build_reason(analysis: DataQualityAnalysis, score: float) -> str:
    return (
        f"NBA Data Quality scoring: containsNbaData={analysis.contains_nba_data}, "
        f"wellStructured={analysis.well_structured}, providesContext={analysis.provides_context}, "
        f"confidence={analysis.confidence}. Score={score}. {analysis.explanation}"
    ).strip()


class DataQualityScorer(BaseScorer):
    """Asks a judge model whether NBA data was presented clearly and with context."""

    name = "NBA Data Quality"
    description = (
        "Checks that NBA data is presented in a clear, informative manner with relevant context"
    )

    def __init__(self, client: Anthropic | Any, model: str | None = None, max_tokens: int = 1024):
        """
        Initialize scorer.

        Args:
            client: Anthropic client (anything with messages.create)
            model: Judge model (defaults to NBA_JUDGE_MODEL or claude-opus-4-1)
            max_tokens: Output token limit for the judge
        """
        self.client = client
        self.model = model or os.getenv("NBA_JUDGE_MODEL", DEFAULT_JUDGE_MODEL)
        self.max_tokens = max_tokens

    def analyze(self, user_text: str, assistant_text: str) -> DataQualityAnalysis:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=JUDGE_INSTRUCTIONS,
            messages=[
                {
                    "role": "user",
                    "content": ANALYSIS_PROMPT.format(
                        user_text=user_text, assistant_text=assistant_text
                    ),
                }
            ],
        )
        reply = "".join(block.text for block in response.content if block.type == "text")
        return parse_analysis(reply)

    def score(self, run: ScorerRun) -> ScoreResult:
        analysis = self.analyze(run.user_text, run.assistant_text)
        score = compute_score(analysis)

        logger.debug(f"Data quality verdict: {analysis.model_dump()}")
        return ScoreResult(
            scorer=self.name,
            score=score,
            reason=build_reason(analysis, score),
            details=analysis.model_dump(by_alias=True),
        )
