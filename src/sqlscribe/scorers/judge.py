"""
Judge capability: prompt in, JSON object out.

Scorers only see the ``Judge`` protocol, so any provider (or a test double
returning canned JSON) can be injected. ``PydanticAIJudge`` is the default and
runs a pydantic-ai agent whose output type is the scorer's verdict schema.
"""

import asyncio
from typing import Any, Dict, Optional, Protocol, Type, runtime_checkable

from pydantic import BaseModel
from pydantic_ai import Agent
from pydantic_ai.models import Model

from ..config import RUN_CONFIG
from ..logger_config import get_logger
from .errors import JudgeError

logger = get_logger("judge")


@runtime_checkable
class Judge(Protocol):
    async def judge(
        self, prompt: str, output_schema: Type[BaseModel]
    ) -> Dict[str, Any]: ...


class PydanticAIJudge:
    """Judge backed by a pydantic-ai agent with structured output.

    Attributes:
        model: pydantic-ai model name (e.g. "groq:llama-3.1-8b-instant") or Model
        instructions: System prompt describing the reviewer role
        timeout: Seconds to wait for the judge before giving up
    """

    def __init__(
        self,
        model: "str | Model",
        instructions: str,
        timeout: Optional[float] = None,
    ):
        self.model = model
        self.instructions = instructions
        self.timeout = timeout if timeout is not None else RUN_CONFIG["judge_timeout"]
        self._agents: Dict[Type[BaseModel], Agent] = {}

    def _agent_for(self, output_schema: Type[BaseModel]) -> Agent:
        # Built on first use so constructing a judge never resolves the model.
        agent = self._agents.get(output_schema)
        if agent is None:
            agent = Agent(
                self.model,
                output_type=output_schema,
                system_prompt=self.instructions,
            )
            self._agents[output_schema] = agent
        return agent

    async def judge(
        self, prompt: str, output_schema: Type[BaseModel]
    ) -> Dict[str, Any]:
        agent = self._agent_for(output_schema)
        try:
            result = await asyncio.wait_for(agent.run(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise JudgeError(f"judge timed out after {self.timeout}s") from e
        except Exception as e:
            raise JudgeError(f"judge call failed: {e}") from e

        output = result.output
        logger.debug(f"Judge verdict ({output_schema.__name__}): {output!r}")
        return output.model_dump(by_alias=True, exclude_none=True)
