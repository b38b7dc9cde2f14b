# -*- coding: utf-8 -*-
"""
Pydantic v2 models returned by the SQL text helpers.

Four result types cover the public surface:
  ValidationResult   – valid flag, formatted SQL, warnings and suggestions
  SchemaInfo         – common columns / relationships / example queries
  ExplanationResult  – plain-English sentence plus per-clause components
  OptimizationResult – possibly rewritten SQL plus improvement notes

Field names are snake_case in Python and camelCase on the wire
(``is_valid`` ⇄ ``isValid``), so the same objects can be handed straight to
an LLM tool call or dumped as JSON.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Dialect = Literal["mysql", "postgresql", "sqlite", "mssql", "oracle"]

DEFAULT_DIALECT: Dialect = "postgresql"


class _ToolModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ValidationResult(_ToolModel):
    """Result of the keyword-level SQL validation."""

    is_valid: bool = True
    formatted: str = ""
    warnings: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"ValidationResult(is_valid={self.is_valid}, "
            f"warnings={len(self.warnings)}, suggestions={len(self.suggestions)})"
        )


class SchemaInfo(_ToolModel):
    """Common schema pattern for a kind of table."""

    common_columns: List[str] = Field(default_factory=list)
    relationships: List[str] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ExplanationComponent(_ToolModel):
    """One recognized clause and what it does."""

    part: str
    description: str


class ExplanationResult(_ToolModel):
    """Plain-English explanation of a SQL statement."""

    explanation: str
    components: List[ExplanationComponent] = Field(default_factory=list)

    @property
    def parts(self) -> List[str]:
        """Component tags in the order they were found."""
        return [c.part for c in self.components]


class OptimizationResult(_ToolModel):
    """Optimization hints for a SQL statement."""

    optimized: str
    improvements: List[str] = Field(default_factory=list)
    performance: str
