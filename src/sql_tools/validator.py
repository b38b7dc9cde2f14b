# -*- coding: utf-8 -*-
"""
Keyword-level SQL validation.

    result = validate_sql(sql)                    # PostgreSQL hints
    result = validate_sql(sql, dialect="mysql")   # MySQL hints

Every check runs on its own and all warnings/suggestions accumulate. Nothing
here parses SQL; the checks are substring and regex tests on the uppercased
text, so any string (empty, prose, broken SQL) yields a result instead of an
exception.
"""

from __future__ import annotations

import re
from typing import Dict, Tuple

from sql_tools.formatter import format_sql
from sql_tools.result import DEFAULT_DIALECT, ValidationResult

# Presence of any of these is what makes text count as SQL at all.
VALIDITY_KEYWORDS: Tuple[str, ...] = (
    "SELECT",
    "INSERT",
    "UPDATE",
    "DELETE",
    "CREATE",
    "DROP",
    "ALTER",
    "FROM",
    "WHERE",
    "JOIN",
)

# Alternation binds loosely: any INNER/LEFT/RIGHT/FULL anywhere counts.
_EXPLICIT_JOIN = re.compile(r"INNER|LEFT|RIGHT|FULL|CROSS\s+JOIN")

NO_KEYWORDS_WARNING = "Query does not contain standard SQL keywords"
SELECT_STAR_WARNING = (
    "Using SELECT * can impact performance. Consider specifying columns explicitly."
)
UNSAFE_MUTATION_WARNING = (
    "UPDATE/DELETE without WHERE clause will affect all rows. Be cautious!"
)
IMPLICIT_JOIN_SUGGESTION = (
    "Consider using explicit JOIN type (INNER, LEFT, RIGHT, etc.) for clarity"
)

DIALECT_SUGGESTIONS: Dict[str, str] = {
    "postgresql": "PostgreSQL supports RETURNING clause for INSERT/UPDATE/DELETE operations",
    "mysql": "MySQL supports LIMIT clause for result pagination",
}


def validate_sql(sql: str, dialect: str = DEFAULT_DIALECT) -> ValidationResult:
    """
    Run the keyword checks on *sql* and format it.

    Args:
        sql:     SQL text to check.
        dialect: One of ``mysql``, ``postgresql``, ``sqlite``, ``mssql``,
                 ``oracle``. Only postgresql and mysql add a suggestion.

    Returns:
        ValidationResult with ``is_valid`` False only when no SQL keyword
        was found at all.
    """
    warnings = []
    suggestions = []
    is_valid = True

    trimmed = sql.strip()
    upper = trimmed.upper()

    if not any(keyword in upper for keyword in VALIDITY_KEYWORDS):
        is_valid = False
        warnings.append(NO_KEYWORDS_WARNING)

    if "SELECT *" in upper:
        warnings.append(SELECT_STAR_WARNING)

    if ("UPDATE" in upper or "DELETE" in upper) and "WHERE" not in upper:
        warnings.append(UNSAFE_MUTATION_WARNING)

    if "JOIN" in upper and not _EXPLICIT_JOIN.search(upper):
        suggestions.append(IMPLICIT_JOIN_SUGGESTION)

    formatted = format_sql(trimmed)

    dialect_hint = DIALECT_SUGGESTIONS.get(dialect)
    if dialect_hint:
        suggestions.append(dialect_hint)

    return ValidationResult(
        is_valid=is_valid,
        formatted=formatted,
        warnings=warnings,
        suggestions=suggestions,
    )
