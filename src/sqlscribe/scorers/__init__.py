"""
Judge-backed quality scorers for generated SQL.

    from sqlscribe.scorers import score, score_all
    result = await score("correctness", response_text, judge=my_judge)
    results = await score_all(response_text, user_text, judge=my_judge)
"""

from .errors import JudgeError, ScoringError, UnknownScorerError
from .extraction import extract_sql
from .judge import Judge, PydanticAIJudge
from .registry import SCORERS, get_scorer, score, score_all
from .scorers import (
    CorrectnessScorer,
    IntentMatchScorer,
    ReadabilityScorer,
    ScoreResult,
    SQLScorer,
)
from .verdicts import CorrectnessVerdict, IntentMatchVerdict, ReadabilityVerdict

__all__ = [
    "score",
    "score_all",
    "get_scorer",
    "SCORERS",
    "SQLScorer",
    "CorrectnessScorer",
    "IntentMatchScorer",
    "ReadabilityScorer",
    "ScoreResult",
    "CorrectnessVerdict",
    "IntentMatchVerdict",
    "ReadabilityVerdict",
    "Judge",
    "PydanticAIJudge",
    "extract_sql",
    "JudgeError",
    "ScoringError",
    "UnknownScorerError",
]
