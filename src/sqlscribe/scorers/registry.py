"""Scorer lookup by name plus the one-shot and fan-out entry points."""

import asyncio
import random
from typing import Callable, Dict, Mapping, Optional, Type, Union

from ..config import get_sampling_rates
from ..logger_config import get_logger
from .errors import ScoringError, UnknownScorerError
from .judge import Judge
from .scorers import (
    CorrectnessScorer,
    IntentMatchScorer,
    ReadabilityScorer,
    ScoreResult,
    SQLScorer,
)

logger = get_logger("scorers")

SCORERS: Dict[str, Type[SQLScorer]] = {
    CorrectnessScorer.name: CorrectnessScorer,
    IntentMatchScorer.name: IntentMatchScorer,
    ReadabilityScorer.name: ReadabilityScorer,
}

JudgeArg = Union[Judge, Mapping[str, Judge], None]


def get_scorer(name: str, judge: Optional[Judge] = None) -> SQLScorer:
    """Instantiate the scorer registered under *name*."""
    try:
        scorer_cls = SCORERS[name]
    except KeyError:
        raise UnknownScorerError(name, tuple(SCORERS)) from None
    return scorer_cls(judge=judge)


def _judge_for(name: str, judge: JudgeArg) -> Optional[Judge]:
    if isinstance(judge, Mapping):
        return judge.get(name)
    return judge


async def score(
    scorer_name: str,
    response_text: str,
    user_text: str = "",
    judge: Optional[Judge] = None,
) -> ScoreResult:
    """
    Score one assistant response with one scorer.

    Args:
        scorer_name: "correctness", "intentMatch" or "readability"
        response_text: Full assistant response (SQL is extracted from it)
        user_text: Original user request (used by intentMatch)
        judge: Judge capability; defaults to the configured pydantic-ai judge

    Raises:
        UnknownScorerError: For names outside SCORERS
        ScoringError: When the judge call fails
    """
    scorer = get_scorer(scorer_name, judge=judge)
    return await scorer.run(response_text, user_text)


async def score_all(
    response_text: str,
    user_text: str = "",
    judge: JudgeArg = None,
    sampling: Optional[Mapping[str, float]] = None,
    rand: Callable[[], float] = random.random,
) -> Dict[str, Union[ScoreResult, ScoringError]]:
    """
    Run every sampled scorer concurrently on one response.

    Each value is either the ScoreResult or the ScoringError of that scorer;
    one scorer failing (or being cancelled) leaves the others untouched.
    Scorers that miss their sampling draw are left out of the result.

    Args:
        judge: One judge for all scorers, or a mapping of scorer name to judge
        sampling: Rate in [0, 1] per scorer name; defaults to configuration
        rand: Source of uniform draws in [0, 1)
    """
    rates = dict(get_sampling_rates() if sampling is None else sampling)
    selected = [name for name in SCORERS if rand() < rates.get(name, 1.0)]
    skipped = [name for name in SCORERS if name not in selected]
    if skipped:
        logger.debug(f"Skipped by sampling: {', '.join(skipped)}")

    async def _run(name: str) -> ScoreResult:
        scorer = get_scorer(name, judge=_judge_for(name, judge))
        return await scorer.run(response_text, user_text)

    outcomes = await asyncio.gather(
        *(_run(name) for name in selected), return_exceptions=True
    )

    results: Dict[str, Union[ScoreResult, ScoringError]] = {}
    for name, outcome in zip(selected, outcomes):
        if isinstance(outcome, (ScoreResult, ScoringError)):
            results[name] = outcome
        elif isinstance(outcome, asyncio.CancelledError):
            logger.warning(f"{name} scorer was cancelled")
            error = ScoringError(name, "judge call cancelled")
            error.__cause__ = outcome
            results[name] = error
        else:
            logger.error(f"{name} scorer raised {outcome!r}")
            error = ScoringError(name, str(outcome))
            error.__cause__ = outcome
            results[name] = error
    return results
