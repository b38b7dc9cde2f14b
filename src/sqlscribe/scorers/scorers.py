"""
SQL quality scorers.

Each scorer is a three-stage pipeline:

    preprocess  – pull the SQL out of the assistant response
    analyze     – one judge call with the scorer's prompt and verdict schema
    score       – deterministic score in [0, 1] plus a reason string

    scorer = CorrectnessScorer(judge=my_judge)
    result = await scorer.run(response_text)

A judge failure is raised as ScoringError; no score is made up for it.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from ..config import get_judge_model
from ..logger_config import get_logger
from .errors import JudgeError, ScoringError
from .extraction import extract_sql
from .judge import Judge, PydanticAIJudge
from .prompts import (
    CORRECTNESS_INSTRUCTIONS,
    CORRECTNESS_PROMPT,
    INTENT_MATCH_INSTRUCTIONS,
    INTENT_MATCH_PROMPT,
    READABILITY_INSTRUCTIONS,
    READABILITY_PROMPT,
)
from .verdicts import CorrectnessVerdict, IntentMatchVerdict, ReadabilityVerdict

logger = get_logger("scorers")

V = TypeVar("V", bound=BaseModel)


class ScoreResult(BaseModel):
    """Outcome of one scorer for one response."""

    scorer: str
    score: float
    reason: str


def _render(value: Any) -> str:
    """Render booleans and numbers the way they appear in JSON."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _clamp(value: float) -> float:
    return float(max(0.0, min(1.0, value)))


class SQLScorer(ABC, Generic[V]):
    """Base class for judge-backed scorers."""

    name: ClassVar[str]
    title: ClassVar[str]
    description: ClassVar[str]
    instructions: ClassVar[str]
    verdict_type: ClassVar[Type[BaseModel]]

    def __init__(self, judge: Optional[Judge] = None):
        self.judge = judge or PydanticAIJudge(
            get_judge_model(self.name), self.instructions
        )

    def preprocess(self, response_text: str, user_text: str = "") -> Dict[str, str]:
        return {"sql": extract_sql(response_text or "")}

    @abstractmethod
    def create_prompt(self, preprocessed: Dict[str, str]) -> str: ...

    @abstractmethod
    def generate_score(self, verdict: V) -> float: ...

    @abstractmethod
    def generate_reason(self, verdict: V, score: float) -> str: ...

    async def analyze(self, prompt: str) -> V:
        raw = await self.judge.judge(prompt, self.verdict_type)
        if not isinstance(raw, dict):
            raise JudgeError(f"expected a JSON object, got {type(raw).__name__}")
        return self.verdict_type.model_validate(raw)

    async def run(self, response_text: str, user_text: str = "") -> ScoreResult:
        preprocessed = self.preprocess(response_text, user_text)
        prompt = self.create_prompt(preprocessed)
        try:
            verdict = await self.analyze(prompt)
        except Exception as e:
            logger.error(f"{self.title} scorer failed: {e}")
            raise ScoringError(self.name, str(e)) from e

        score = self.generate_score(verdict)
        reason = self.generate_reason(verdict, score)
        logger.debug(f"{self.title}: {reason}")
        return ScoreResult(scorer=self.name, score=score, reason=reason)


class CorrectnessScorer(SQLScorer[CorrectnessVerdict]):
    name = "correctness"
    title = "SQL Correctness"
    description = (
        "Evaluates if the generated SQL is syntactically correct and follows "
        "best practices"
    )
    instructions = CORRECTNESS_INSTRUCTIONS
    verdict_type = CorrectnessVerdict

    def create_prompt(self, preprocessed: Dict[str, str]) -> str:
        return CORRECTNESS_PROMPT.format(sql=preprocessed["sql"])

    def generate_score(self, verdict: CorrectnessVerdict) -> float:
        score = 1.0
        if not verdict.is_syntactically_correct:
            score -= 0.5
        if not verdict.has_best_practices:
            score -= 0.2
        if verdict.security_issues:
            score -= 0.3
        confidence = 1.0 if verdict.confidence is None else verdict.confidence
        return _clamp(score * confidence)

    def generate_reason(self, verdict: CorrectnessVerdict, score: float) -> str:
        return (
            f"SQL Correctness: syntax={_render(verdict.is_syntactically_correct)}, "
            f"bestPractices={_render(verdict.has_best_practices)}, "
            f"securityIssues={len(verdict.security_issues)}. "
            f"Score={_render(score)}. {verdict.feedback or ''}"
        )


class IntentMatchScorer(SQLScorer[IntentMatchVerdict]):
    name = "intentMatch"
    title = "Intent Match"
    description = "Evaluates if the SQL query matches the user's intended operation"
    instructions = INTENT_MATCH_INSTRUCTIONS
    verdict_type = IntentMatchVerdict

    def preprocess(self, response_text: str, user_text: str = "") -> Dict[str, str]:
        return {"user_text": user_text or "", "sql": extract_sql(response_text or "")}

    def create_prompt(self, preprocessed: Dict[str, str]) -> str:
        return INTENT_MATCH_PROMPT.format(
            user_text=preprocessed["user_text"], sql=preprocessed["sql"]
        )

    def generate_score(self, verdict: IntentMatchVerdict) -> float:
        if not verdict.matches_intent:
            return 0.2
        confidence = 0.9 if verdict.confidence is None else verdict.confidence
        return _clamp(confidence)

    def generate_reason(self, verdict: IntentMatchVerdict, score: float) -> str:
        confidence = 0 if verdict.confidence is None else verdict.confidence
        return (
            f"Intent Match: matches={_render(verdict.matches_intent)}, "
            f"confidence={_render(confidence)}. "
            f"Score={_render(score)}. {verdict.reasoning or ''}"
        )


class ReadabilityScorer(SQLScorer[ReadabilityVerdict]):
    name = "readability"
    title = "SQL Readability"
    description = "Evaluates if the SQL query is well-formatted and documented"
    instructions = READABILITY_INSTRUCTIONS
    verdict_type = ReadabilityVerdict

    def create_prompt(self, preprocessed: Dict[str, str]) -> str:
        return READABILITY_PROMPT.format(sql=preprocessed["sql"])

    def generate_score(self, verdict: ReadabilityVerdict) -> float:
        if verdict.readability_score is None:
            return 0.5
        return _clamp(verdict.readability_score)

    def generate_reason(self, verdict: ReadabilityVerdict, score: float) -> str:
        suggestions = (
            "none" if verdict.suggestions is None else ", ".join(verdict.suggestions)
        )
        return (
            f"Readability: formatted={_render(verdict.is_formatted)}, "
            f"hasComments={_render(verdict.has_comments)}. "
            f"Score={_render(score)}. Suggestions: {suggestions}"
        )
