"""Scorers that grade the NBA assistant's answers."""

from scorers.base import BaseScorer
from scorers.completeness import CompletenessScorer
from scorers.data_quality import DataQualityScorer
from scorers.tool_call_accuracy import ToolCallAccuracyScorer

__all__ = [
    "BaseScorer",
    "CompletenessScorer",
    "DataQualityScorer",
    "ToolCallAccuracyScorer",
]
