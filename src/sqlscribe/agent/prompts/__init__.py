from .sql_prompt import SQL_AGENT_PROMPT

__all__ = ["SQL_AGENT_PROMPT"]
