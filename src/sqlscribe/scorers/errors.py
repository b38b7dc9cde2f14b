"""Exceptions raised by the scoring pipelines."""

from typing import Optional


class JudgeError(Exception):
    """The judge capability failed or returned something other than a JSON object."""


class ScoringError(Exception):
    """A scorer pipeline failed; the scorer name is kept for reporting."""

    def __init__(self, scorer: str, message: Optional[str] = None):
        self.scorer = scorer
        super().__init__(f"{scorer}: {message}" if message else scorer)


class UnknownScorerError(ScoringError):
    """Exception raised for scorer names outside the registry."""

    def __init__(self, scorer: str, known: tuple):
        self.known = known
        super().__init__(
            scorer, f"unknown scorer (expected one of: {', '.join(known)})"
        )
