import json

import pytest
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from code_critic.core.exceptions import APIError
from code_critic.infrastructure.entrypoints.mcp import CritiqueCodeTool, create_mcp_server
from code_critic.infrastructure.entrypoints.mcp.critique_code_tool import DEFAULT_USER_GOAL

REVIEW = '{"overall_score": 8, "context_alignment": {"alignment_score": 9, "goal_analysis": "ok"}}'


@pytest.mark.asyncio
async def test_run_returns_pretty_printed_result(usecase, fake_client):
    fake_client.reply = REVIEW
    tool = CritiqueCodeTool(usecase)

    text = await tool.run("print('hi')", "python", framework="django", user_goal="keep it short")

    data = json.loads(text)
    assert data["overall_score"] == 8
    assert data["context_alignment"]["goal_analysis"] == "ok"
    assert data["analysis_metadata"]["model_used"] == usecase.model_name
    assert text.startswith("{\n  ")
    _, user_prompt = fake_client.calls[0]
    assert "USER GOAL: keep it short" in user_prompt
    assert "FRAMEWORK: django" in user_prompt


@pytest.mark.asyncio
async def test_run_uses_default_goal_when_none_given(usecase, fake_client):
    tool = CritiqueCodeTool(usecase)

    await tool.run("x = 1", "python")

    _, user_prompt = fake_client.calls[0]
    assert f"USER GOAL: {DEFAULT_USER_GOAL}" in user_prompt
    assert "FRAMEWORK:" not in user_prompt


@pytest.mark.asyncio
async def test_validation_failure_becomes_tool_error(usecase, fake_client, settings):
    tool = CritiqueCodeTool(usecase)

    with pytest.raises(ToolError, match="exceeds maximum allowed length"):
        await tool.run("x" * (settings.max_code_length + 1), "python")

    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_upstream_failure_becomes_tool_error(usecase, fake_client):
    fake_client.error = APIError("Completion API error: Unauthorized", status=401)
    tool = CritiqueCodeTool(usecase)

    with pytest.raises(ToolError, match="Unauthorized"):
        await tool.run("x = 1", "python")


@pytest.mark.asyncio
async def test_server_registers_critique_code_tool(settings, usecase):
    server = create_mcp_server(settings, usecase)

    tools = await server.list_tools()

    assert isinstance(server, FastMCP)
    assert [t.name for t in tools] == ["critique-code"]
    schema = tools[0].inputSchema
    assert set(schema["properties"]) == {"code", "language", "framework", "userGoal"}
    assert set(schema["required"]) == {"code", "language"}
