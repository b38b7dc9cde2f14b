"""SQL generator agent and its completion adapter."""

from .sqlagent import TOOL_NAMES, AgentCompletion, build_sql_agent

__all__ = ["AgentCompletion", "build_sql_agent", "TOOL_NAMES"]
