# -*- coding: utf-8 -*-
"""
Pattern-based optimization hints.

Each known inefficient pattern adds one note; the only rewrite performed is
``NOT IN`` → ``NOT EXISTS`` (every occurrence, case-insensitive). The rewrite
is purely textual and does not account for NULL-producing subqueries.
"""

from __future__ import annotations

import re

from sql_tools.result import OptimizationResult

_LEADING_WILDCARD = re.compile(r"%.*LIKE", re.IGNORECASE)
_NOT_IN = re.compile(r"NOT IN", re.IGNORECASE)
_WHERE_OR = re.compile(r"WHERE.*OR")
_COMMA_JOIN = re.compile(r"FROM\s+\w+\s*,\s*\w+", re.IGNORECASE | re.ASCII)

EXPLAIN_NOTE = "Use EXPLAIN or EXPLAIN ANALYZE to understand query execution plan"

MULTIPLE_OPPORTUNITIES = "This query has multiple optimization opportunities"
RELATIVELY_OPTIMIZED = "This query looks relatively optimized"


def optimize_sql(sql: str) -> OptimizationResult:
    """Collect optimization notes for *sql*; the EXPLAIN note is always last."""
    improvements = []
    optimized = sql
    upper = sql.upper()

    if "SELECT *" in upper:
        improvements.append(
            "Replace SELECT * with specific column names to reduce data transfer"
        )

    if "WHERE" in upper:
        improvements.append("Ensure columns used in WHERE clause are indexed")

    if _LEADING_WILDCARD.search(sql):
        improvements.append(
            "LIKE patterns starting with % cannot use indexes efficiently"
        )

    if "NOT IN" in upper:
        optimized = _NOT_IN.sub("NOT EXISTS", sql)
        improvements.append("Replaced NOT IN with NOT EXISTS for better performance")

    if _WHERE_OR.search(upper):
        improvements.append(
            "Consider breaking OR conditions into UNION queries for better index usage"
        )

    if _COMMA_JOIN.search(sql):
        improvements.append(
            "Use explicit JOIN syntax instead of comma-separated tables for clarity"
        )

    improvements.append(EXPLAIN_NOTE)

    # EXPLAIN_NOTE counts toward the threshold.
    performance = MULTIPLE_OPPORTUNITIES if len(improvements) > 2 else RELATIVELY_OPTIMIZED

    return OptimizationResult(
        optimized=optimized,
        improvements=improvements,
        performance=performance,
    )
