# -*- coding: utf-8 -*-
"""
Plain-English explanation of a SQL statement.

    explain_sql("SELECT id FROM users WHERE active ORDER BY id").explanation
    # 'This SQL query retrieves data from the "users" table with specific
    #  conditions and sorts the results '

The statement kind is decided by the first of SELECT / INSERT / UPDATE /
DELETE found in the text (in that order), so ``INSERT ... SELECT`` reads as a
SELECT. All other clauses are reported independently.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from sql_tools.result import ExplanationComponent, ExplanationResult

_SELECT_STAR = re.compile(r"SELECT\s+\*", re.IGNORECASE)
_FROM_TABLE = re.compile(r"FROM\s+(\w+)", re.IGNORECASE | re.ASCII)

# (keyword, explanation fragment, component description)
_STATEMENT_KINDS: Tuple[Tuple[str, str, str], ...] = (
    ("SELECT", "retrieves data ", "Specifies which columns to retrieve"),
    ("INSERT", "inserts new data ", "Adds new rows to a table"),
    ("UPDATE", "modifies existing data ", "Changes existing rows in a table"),
    ("DELETE", "removes data ", "Removes rows from a table"),
)

_CLAUSES: Tuple[Tuple[str, str, str], ...] = (
    (
        "WHERE",
        "with specific conditions ",
        "Filters rows based on specified conditions",
    ),
    (
        "JOIN",
        "by combining data from multiple tables ",
        "Combines rows from two or more tables based on related columns",
    ),
    (
        "GROUP BY",
        "and groups results by specific columns ",
        "Groups rows that have the same values in specified columns",
    ),
    (
        "ORDER BY",
        "and sorts the results ",
        "Sorts the result set by specified columns",
    ),
    (
        "LIMIT",
        "and limits the number of results returned",
        "Restricts the number of rows returned",
    ),
)


def explain_sql(sql: str) -> ExplanationResult:
    """Describe *sql* clause by clause."""
    components: List[ExplanationComponent] = []
    upper = sql.upper()

    explanation = "This SQL query "

    for keyword, fragment, description in _STATEMENT_KINDS:
        if keyword not in upper:
            continue
        explanation += fragment
        components.append(ExplanationComponent(part=keyword, description=description))
        if keyword == "SELECT" and _SELECT_STAR.search(sql):
            components.append(
                ExplanationComponent(
                    part="SELECT *",
                    description="Selects all columns from the table",
                )
            )
        break

    from_match = _FROM_TABLE.search(sql)
    if from_match:
        table = from_match.group(1)
        explanation += f'from the "{table}" table '
        components.append(
            ExplanationComponent(
                part="FROM",
                description=f"Specifies the source table: {table}",
            )
        )

    for keyword, fragment, description in _CLAUSES:
        if keyword in upper:
            explanation += fragment
            components.append(
                ExplanationComponent(part=keyword, description=description)
            )

    return ExplanationResult(explanation=explanation, components=components)
