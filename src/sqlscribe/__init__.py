"""
SQLScribe: natural-language-to-SQL assistant.

Subpackages:
    sqlscribe.agent     pydantic-ai SQL generator agent with the sql_tools toolset
    sqlscribe.scorers   judge-backed correctness / intent / readability scorers

Modules:
    sqlscribe.workflow  generate-SQL workflow (prompt → stream → extracted SQL)
    sqlscribe.cli       command line front end
"""

from .workflow import (
    GenerateSQLInput,
    GenerateSQLOutput,
    WorkflowError,
    build_prompt,
    generate_sql,
)

__all__ = [
    "GenerateSQLInput",
    "GenerateSQLOutput",
    "WorkflowError",
    "build_prompt",
    "generate_sql",
]
