# -*- coding: utf-8 -*-
"""
sql_tools: keyword-level SQL validation, formatting, explanation and
optimization hints.

Public API
----------
Text helpers (pure, never raise)::

    from sql_tools import validate_sql, format_sql, explain_sql, optimize_sql
    result = validate_sql(sql)                    # postgresql hints
    result = validate_sql(sql, dialect="mysql")

Schema patterns::

    from sql_tools import get_schema_info
    info = get_schema_info("users")

Result types::

    from sql_tools import ValidationResult, SchemaInfo, ExplanationResult, OptimizationResult

Agent tools::

    from sql_tools import SQL_TOOLS
"""

from sql_tools.explainer import explain_sql
from sql_tools.formatter import FORMAT_KEYWORDS, format_sql
from sql_tools.llm_tool import (
    SQL_TOOLS,
    schema_info,
    sql_explainer,
    sql_optimizer,
    sql_validator,
)
from sql_tools.optimizer import optimize_sql
from sql_tools.result import (
    DEFAULT_DIALECT,
    Dialect,
    ExplanationComponent,
    ExplanationResult,
    OptimizationResult,
    SchemaInfo,
    ValidationResult,
)
from sql_tools.schema_info import SCHEMA_PATTERNS, get_schema_info
from sql_tools.validator import VALIDITY_KEYWORDS, validate_sql

__all__ = [
    # ── Text helpers ──────────────────────────────────────────────────────
    "validate_sql",
    "format_sql",
    "explain_sql",
    "optimize_sql",
    "get_schema_info",
    # ── Result types ──────────────────────────────────────────────────────
    "ValidationResult",
    "SchemaInfo",
    "ExplanationComponent",
    "ExplanationResult",
    "OptimizationResult",
    "Dialect",
    "DEFAULT_DIALECT",
    # ── Keyword tables ────────────────────────────────────────────────────
    "FORMAT_KEYWORDS",
    "VALIDITY_KEYWORDS",
    "SCHEMA_PATTERNS",
    # ── Agent tools ───────────────────────────────────────────────────────
    "SQL_TOOLS",
    "sql_validator",
    "schema_info",
    "sql_explainer",
    "sql_optimizer",
]
