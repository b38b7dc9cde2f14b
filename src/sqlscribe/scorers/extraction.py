"""Locate the SQL payload inside an LLM response."""

import re

_SQL_FENCE = re.compile(r"```sql\n(.*?)\n```", re.DOTALL)
_ANY_FENCE = re.compile(r"```\n(.*?)\n```", re.DOTALL)


def extract_sql(text: str) -> str:
    """Return the first ```sql block, else the first bare ``` block, else *text* as is."""
    match = _SQL_FENCE.search(text) or _ANY_FENCE.search(text)
    return match.group(1) if match else text
