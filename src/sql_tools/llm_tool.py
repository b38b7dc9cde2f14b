# -*- coding: utf-8 -*-
"""SQL helper functions shaped for LLM agent tool calls."""

from typing import Optional

from sql_tools.explainer import explain_sql
from sql_tools.optimizer import optimize_sql
from sql_tools.result import (
    DEFAULT_DIALECT,
    Dialect,
    ExplanationResult,
    OptimizationResult,
    SchemaInfo,
    ValidationResult,
)
from sql_tools.schema_info import get_schema_info
from sql_tools.validator import validate_sql


def sql_validator(sql: str, dialect: Optional[Dialect] = None) -> ValidationResult:
    """Validates and formats SQL queries for correctness and best practices.

    Args:
        sql: SQL query to validate.
        dialect: SQL dialect to validate against (default: postgresql).
    """
    return validate_sql(sql, dialect or DEFAULT_DIALECT)


def schema_info(table_type: str) -> SchemaInfo:
    """Provides common database schema patterns and examples for SQL generation.

    Args:
        table_type: Type of table (e.g., users, products, orders, transactions).
    """
    return get_schema_info(table_type)


def sql_explainer(sql: str) -> ExplanationResult:
    """Explains what a SQL query does in plain English.

    Args:
        sql: SQL query to explain.
    """
    return explain_sql(sql)


def sql_optimizer(sql: str) -> OptimizationResult:
    """Suggests optimizations for SQL queries.

    Args:
        sql: SQL query to optimize.
    """
    return optimize_sql(sql)


SQL_TOOLS = (sql_validator, schema_info, sql_explainer, sql_optimizer)
