# -*- coding: utf-8 -*-
"""
Tests for the generate-SQL workflow.
"""

import asyncio

import pytest
from pydantic_ai.models.test import TestModel

from sqlscribe import (
    GenerateSQLInput,
    GenerateSQLOutput,
    WorkflowError,
    build_prompt,
    generate_sql,
)
from sqlscribe.agent import AgentCompletion, build_sql_agent


class FakeCompletion:
    """Completion double streaming fixed chunks."""

    def __init__(self, chunks):
        self.chunks = chunks
        self.prompts = []

    async def stream(self, prompt):
        self.prompts.append(prompt)
        for chunk in self.chunks:
            yield chunk


class TestBuildPrompt:

    def test_message_only(self):
        assert build_prompt(GenerateSQLInput(message="list users")) == "list users"

    def test_dialect_uppercased(self):
        prompt = build_prompt(GenerateSQLInput(message="list users", dialect="mysql"))

        assert prompt == "list users\n\nPlease use MYSQL syntax."

    def test_dialect_then_context(self):
        input_data = GenerateSQLInput(
            message="list users",
            dialect="postgresql",
            context="users(id, email, is_active)",
        )

        assert build_prompt(input_data) == (
            "list users\n\nPlease use POSTGRESQL syntax."
            "\n\nAdditional context: users(id, email, is_active)"
        )

    def test_empty_context_ignored(self):
        assert build_prompt(GenerateSQLInput(message="x", context="")) == "x"


class TestGenerateSQL:

    def test_extracts_fenced_sql(self):
        completion = FakeCompletion(
            ["Here you go:\n", "```sql\nSELECT id ", "FROM users;\n```", "\nDone."]
        )
        output = asyncio.run(
            generate_sql(GenerateSQLInput(message="list users"), completion=completion)
        )

        assert isinstance(output, GenerateSQLOutput)
        assert output.sql == "SELECT id FROM users;"
        assert output.response == (
            "Here you go:\n```sql\nSELECT id FROM users;\n```\nDone."
        )
        assert output.explanation == output.response

    def test_prompt_passed_to_completion(self):
        completion = FakeCompletion(["SELECT 1"])
        asyncio.run(
            generate_sql(
                GenerateSQLInput(message="one", dialect="sqlite"), completion=completion
            )
        )

        assert completion.prompts == ["one\n\nPlease use SQLITE syntax."]

    def test_unfenced_response_is_the_sql(self):
        output = asyncio.run(
            generate_sql(
                GenerateSQLInput(message="one"), completion=FakeCompletion(["SELECT 1"])
            )
        )

        assert output.sql == "SELECT 1"

    def test_on_chunk_sees_every_chunk(self):
        seen = []
        chunks = ["a", "b", "c"]
        asyncio.run(
            generate_sql(
                GenerateSQLInput(message="x"),
                completion=FakeCompletion(chunks),
                on_chunk=seen.append,
            )
        )

        assert seen == chunks

    @pytest.mark.parametrize("message", ["", "   ", "\n\t"])
    def test_blank_message(self, message):
        completion = FakeCompletion(["SELECT 1"])

        with pytest.raises(WorkflowError, match="Input data not found"):
            asyncio.run(generate_sql(GenerateSQLInput(message=message), completion=completion))
        assert completion.prompts == []

    def test_missing_input(self):
        with pytest.raises(WorkflowError):
            asyncio.run(generate_sql(None, completion=FakeCompletion([])))

    def test_with_agent_completion(self):
        model = TestModel(call_tools=[], custom_output_text="```sql\nSELECT 1\n```")
        completion = AgentCompletion(build_sql_agent(model))

        output = asyncio.run(
            generate_sql(GenerateSQLInput(message="one"), completion=completion)
        )

        assert output.sql == "SELECT 1"
