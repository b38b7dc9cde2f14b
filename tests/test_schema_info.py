# -*- coding: utf-8 -*-
"""
Tests for the static schema pattern lookup.
"""

import pytest
from pydantic import ValidationError
from sql_tools import SCHEMA_PATTERNS, get_schema_info


class TestSchemaInfo:

    @pytest.mark.parametrize("table_type", ["users", "products", "orders"])
    def test_known_table_types(self, table_type):
        info = get_schema_info(table_type)

        assert info == SCHEMA_PATTERNS[table_type]
        assert info is not SCHEMA_PATTERNS[table_type]
        assert "id" in info.common_columns
        assert len(info.examples) == 3

    def test_lookup_is_case_insensitive(self):
        assert get_schema_info("USERS") == get_schema_info("users")
        assert get_schema_info("Orders") == get_schema_info("orders")

    def test_fallback(self):
        info = get_schema_info("widgets")

        assert info.common_columns == ["id", "name", "created_at", "updated_at"]
        assert info.relationships == ["Depends on your specific database schema"]
        assert len(info.examples) == 1
        assert "widgets" in info.examples[0]

    def test_fallback_keeps_original_spelling(self):
        info = get_schema_info("Widgets")

        assert info.examples == ["SELECT * FROM Widgets LIMIT 10"]

    def test_no_partial_matching(self):
        assert get_schema_info("user").relationships == [
            "Depends on your specific database schema"
        ]

    def test_patterns_are_immutable(self):
        with pytest.raises(TypeError):
            SCHEMA_PATTERNS["widgets"] = get_schema_info("widgets")  # type: ignore[index]
        with pytest.raises(ValidationError):
            get_schema_info("users").examples = []

    def test_to_dict(self):
        d = get_schema_info("products").to_dict()

        assert set(d) == {"commonColumns", "relationships", "examples"}

    def test_changing_a_result_leaves_patterns_intact(self):
        info = get_schema_info("users")
        info.examples.append("DROP TABLE users")
        info.common_columns.clear()

        again = get_schema_info("USERS")
        assert "DROP TABLE users" not in again.examples
        assert "id" in again.common_columns
        assert "DROP TABLE users" not in SCHEMA_PATTERNS["users"].examples
