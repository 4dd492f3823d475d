"""Code scorer measuring how much of the question the answer covers."""

import re

from models.scoring import ScoreResult, ScorerRun
from scorers.base import BaseScorer

STOP_WORDS = frozenset(
    """
    a about an and are as at be been but by can could did do does for from get give
    had has have how i in is it its me my of on or please show tell than that the
    their them then there these they this to us was we were what when where which
    who why will with would you your
    """.split()
)

_TOKEN = re.compile(r"[a-z0-9]+(?:['-][a-z0-9]+)*")


def extract_terms(text: str) -> list[str]:
    """Significant lowercase terms of a text, de-duplicated in order of appearance."""
    terms = []
    for token in _TOKEN.findall(text.lower()):
        if len(token) > 1 and token not in STOP_WORDS and token not in terms:
            terms.append(token)
    return terms


class CompletenessScorer(BaseScorer):
    """Fraction of the question's significant terms that appear in the answer."""

    name = "Completeness"
    description = "Checks that the answer covers the elements of the question"

    def score(self, run: ScorerRun) -> ScoreResult:
        input_terms = extract_terms(run.user_text)
        output_terms = set(extract_terms(run.assistant_text))

        if not input_terms and not output_terms:
            return ScoreResult(scorer=self.name, score=1.0, reason="Both input and output are empty")
        if not input_terms or not output_terms:
            return ScoreResult(scorer=self.name, score=0.0, reason="Input or output is empty")

        covered = [term for term in input_terms if term in output_terms]
        missing = [term for term in input_terms if term not in output_terms]
        score = len(covered) / len(input_terms)

        return ScoreResult(
            scorer=self.name,
            score=score,
            reason=f"Answer covers {len(covered)} of {len(input_terms)} terms from the question",
            details={"covered": covered, "missing": missing},
        )
