"""Base class for answer scorers."""

from abc import ABC, abstractmethod

from models.scoring import ScoreResult, ScorerRun


class BaseScorer(ABC):
    """A scorer grades one assistant turn with a score in [0, 1] and a reason."""

    name: str = "scorer"
    description: str = ""

    @abstractmethod
    def score(self, run: ScorerRun) -> ScoreResult:
        """Grade a run."""
        raise NotImplementedError(f"Scorer '{type(self).__name__}' must implement score()")
