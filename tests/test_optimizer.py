# -*- coding: utf-8 -*-
"""
Tests for the pattern-based SQL optimizer.
"""

from sql_tools import optimize_sql
from sql_tools.optimizer import (
    EXPLAIN_NOTE,
    MULTIPLE_OPPORTUNITIES,
    RELATIVELY_OPTIMIZED,
)


class TestRewrite:
    """NOT IN → NOT EXISTS is the only rewrite."""

    def test_not_in_rewritten(self):
        result = optimize_sql("SELECT * FROM t WHERE a NOT IN (1,2)")

        assert result.optimized == "SELECT * FROM t WHERE a NOT EXISTS (1,2)"
        assert "NOT IN" not in result.optimized
        assert result.improvements == [
            "Replace SELECT * with specific column names to reduce data transfer",
            "Ensure columns used in WHERE clause are indexed",
            "Replaced NOT IN with NOT EXISTS for better performance",
            EXPLAIN_NOTE,
        ]
        assert result.performance == MULTIPLE_OPPORTUNITIES

    def test_not_in_case_insensitive_all_occurrences(self):
        sql = "select a from t where b not in (select c from u) and d Not In (1)"
        result = optimize_sql(sql)

        assert result.optimized == (
            "select a from t where b NOT EXISTS (select c from u) and d NOT EXISTS (1)"
        )

    def test_unchanged_without_not_in(self):
        sql = "SELECT id FROM users WHERE id = 1"

        assert optimize_sql(sql).optimized == sql


class TestImprovements:
    """Improvement notes and the performance summary."""

    def test_clean_query(self):
        result = optimize_sql("SELECT id FROM users")

        assert result.improvements == [EXPLAIN_NOTE]
        assert result.performance == RELATIVELY_OPTIMIZED

    def test_two_notes_still_relatively_optimized(self):
        """The EXPLAIN note counts toward the threshold of more than two."""
        result = optimize_sql("SELECT id FROM users WHERE id = 1")

        assert len(result.improvements) == 2
        assert result.performance == RELATIVELY_OPTIMIZED

    def test_where_or(self):
        result = optimize_sql("SELECT id FROM users WHERE a = 1 OR b = 2")

        assert (
            "Consider breaking OR conditions into UNION queries for better index usage"
            in result.improvements
        )
        assert result.performance == MULTIPLE_OPPORTUNITIES

    def test_comma_join(self):
        result = optimize_sql("SELECT a.id FROM a, b WHERE a.id = b.id")

        assert (
            "Use explicit JOIN syntax instead of comma-separated tables for clarity"
            in result.improvements
        )

    def test_like_note_requires_percent_before_like(self):
        note = "LIKE patterns starting with % cannot use indexes efficiently"

        assert note not in optimize_sql(
            "SELECT id FROM users WHERE name LIKE 'bob%'"
        ).improvements
        assert note in optimize_sql(
            "SELECT id FROM t WHERE code % 2 = 0 AND name like 'a'"
        ).improvements

    def test_explain_note_always_last(self):
        for sql in ("", "SELECT * FROM a, b WHERE x NOT IN (1) OR y = 2"):
            assert optimize_sql(sql).improvements[-1] == EXPLAIN_NOTE
