"""Shared data models for the NBA assistant."""

from models.game import Game
from models.player import Player
from models.request import DataCategory, DataRequest, ResultEnvelope
from models.scoring import ScoreResult, ScorerRun
from models.standing import Standing
from models.team import Team

__all__ = [
    "DataCategory",
    "DataRequest",
    "Game",
    "Player",
    "ResultEnvelope",
    "ScoreResult",
    "ScorerRun",
    "Standing",
    "Team",
]
