"""
Generate-SQL workflow.

    output = await generate_sql(GenerateSQLInput(message="list active users"))
    output.sql        # SQL pulled from the response's fenced block
    output.response   # full assistant text

The workflow builds the prompt (dialect and extra context appended to the
message), streams the completion, and extracts the SQL payload.
"""

from typing import AsyncIterator, Callable, Optional, Protocol

from pydantic import BaseModel, Field

from sql_tools import Dialect

from .agent import AgentCompletion
from .logger_config import get_logger
from .scorers.extraction import extract_sql

logger = get_logger("workflow")


class WorkflowError(Exception):
    """Exception raised for workflow input that cannot be processed."""


class Completion(Protocol):
    def stream(self, prompt: str) -> AsyncIterator[str]: ...


class GenerateSQLInput(BaseModel):
    """Natural-language request for the SQL generator."""

    message: str = Field(..., description="Natural language query to convert to SQL")
    dialect: Optional[Dialect] = Field(
        default=None, description="SQL dialect preference"
    )
    context: Optional[str] = Field(
        default=None,
        description="Additional context like table schema or requirements",
    )


class GenerateSQLOutput(BaseModel):
    sql: str
    explanation: str
    response: str


def build_prompt(input_data: GenerateSQLInput) -> str:
    prompt = input_data.message
    if input_data.dialect:
        prompt += f"\n\nPlease use {input_data.dialect.upper()} syntax."
    if input_data.context:
        prompt += f"\n\nAdditional context: {input_data.context}"
    return prompt


async def generate_sql(
    input_data: Optional[GenerateSQLInput],
    completion: Optional[Completion] = None,
    on_chunk: Optional[Callable[[str], None]] = None,
) -> GenerateSQLOutput:
    """
    Run the SQL generator on one request.

    Args:
        input_data: Request with message, optional dialect and context
        completion: Completion capability; defaults to the SQL agent
        on_chunk: Called with every streamed text chunk (e.g. to echo it)

    Returns:
        GenerateSQLOutput; ``explanation`` and ``response`` both hold the
        full assistant text

    Raises:
        WorkflowError: If there is no input or the message is blank
    """
    if input_data is None or not input_data.message.strip():
        raise WorkflowError("Input data not found")

    if completion is None:
        completion = AgentCompletion()

    prompt = build_prompt(input_data)
    logger.info(f"Generating SQL (dialect={input_data.dialect or 'default'})")

    chunks = []
    async for chunk in completion.stream(prompt):
        if on_chunk is not None:
            on_chunk(chunk)
        chunks.append(chunk)
    response_text = "".join(chunks)

    sql = extract_sql(response_text)
    logger.debug(f"Extracted SQL: {sql!r}")
    return GenerateSQLOutput(sql=sql, explanation=response_text, response=response_text)
