"""
SQLScribe Agent

A Pydantic AI agent that turns natural-language requests into SQL. The four
keyword-level helpers from sql_tools are registered as tools so the model can
validate, explain and optimize its own output before answering.
"""

from typing import AsyncIterator, Optional

from pydantic_ai import Agent
from pydantic_ai.models import Model

from sql_tools.llm_tool import schema_info, sql_explainer, sql_optimizer, sql_validator

from ..config import get_model
from ..logger_config import configure_logfire, get_logger
from .prompts import SQL_AGENT_PROMPT

logger = get_logger("agent")

TOOL_NAMES = ("sql_validator", "schema_info", "sql_explainer", "sql_optimizer")


def build_sql_agent(model: "str | Model | None" = None) -> Agent:
    """Create the SQL generator agent with its toolset.

    Args:
        model: pydantic-ai model name or Model instance; defaults to
            SQLSCRIBE_MODEL from the environment

    Returns:
        Agent producing plain-text answers with fenced SQL blocks
    """
    configure_logfire()
    model = model or get_model()
    logger.debug(f"Building SQL agent with model {model}")

    agent = Agent(model, system_prompt=SQL_AGENT_PROMPT, output_type=str)
    agent.tool_plain(name="sql_validator")(sql_validator)
    agent.tool_plain(name="schema_info")(schema_info)
    agent.tool_plain(name="sql_explainer")(sql_explainer)
    agent.tool_plain(name="sql_optimizer")(sql_optimizer)
    return agent


class AgentCompletion:
    """Completion capability that streams text from the SQL agent."""

    def __init__(self, agent: Optional[Agent] = None):
        self.agent = agent or build_sql_agent()

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        async with self.agent.run_stream(prompt) as result:
            async for chunk in result.stream_text(delta=True):
                yield chunk
