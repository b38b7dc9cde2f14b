# -*- coding: utf-8 -*-
"""
Keyword-based SQL formatter.

    format_sql("select id from users where id = 1")
    # 'SELECT id\\nFROM users\\nWHERE id = 1'

There is no tokenizer here: whitespace is collapsed and a line break is put in
front of every clause keyword, in the order of ``FORMAT_KEYWORDS``.
"""

from __future__ import annotations

import re
from typing import Tuple

# Order matters: JOIN is substituted before INNER/LEFT/RIGHT JOIN, so those
# end up split over two lines. Formatting output stays stable under re-runs.
FORMAT_KEYWORDS: Tuple[str, ...] = (
    "SELECT",
    "FROM",
    "WHERE",
    "JOIN",
    "INNER JOIN",
    "LEFT JOIN",
    "RIGHT JOIN",
    "GROUP BY",
    "HAVING",
    "ORDER BY",
    "LIMIT",
    "OFFSET",
    "INSERT INTO",
    "VALUES",
    "UPDATE",
    "SET",
    "DELETE FROM",
)

_WHITESPACE = re.compile(r"\s+")
_KEYWORD_PATTERNS = tuple(
    (re.compile(rf"\b{keyword}\b", re.IGNORECASE | re.ASCII), keyword)
    for keyword in FORMAT_KEYWORDS
)


def format_sql(sql: str) -> str:
    """Put each clause keyword of *sql* on its own line, uppercased."""
    formatted = _WHITESPACE.sub(" ", sql).strip()

    for pattern, keyword in _KEYWORD_PATTERNS:
        formatted = pattern.sub("\n" + keyword.upper(), formatted)

    lines = (line.strip() for line in formatted.split("\n"))
    return "\n".join(line for line in lines if line)
