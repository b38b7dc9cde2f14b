"""
Structured verdicts returned by the judge, one model per scorer.

The judge answers in camelCase JSON (``isSyntacticallyCorrect``, ...). Every
field has a safe default and ``null`` counts as missing, so partial judge
output still produces a verdict; unknown keys are ignored.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _Verdict(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class CorrectnessVerdict(_Verdict):
    is_syntactically_correct: bool = False
    has_best_practices: bool = False
    security_issues: List[str] = Field(default_factory=list)
    confidence: Optional[float] = None
    feedback: Optional[str] = None


class IntentMatchVerdict(_Verdict):
    matches_intent: bool = False
    confidence: Optional[float] = None
    reasoning: Optional[str] = None


class ReadabilityVerdict(_Verdict):
    is_formatted: bool = False
    has_comments: bool = False
    readability_score: Optional[float] = None
    suggestions: Optional[List[str]] = None
