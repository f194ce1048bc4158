"""MCP surface: exposes the critique pipeline as the ``critique-code`` tool."""

from __future__ import annotations

import json
from dataclasses import dataclass

import structlog
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from code_critic.core.application.critique import CritiqueCodeUseCase
from code_critic.core.exceptions import APIError, ValidationError
from code_critic.infrastructure.configuration import CodeCriticSettings
from code_critic.infrastructure.resolution import build_critique_usecase

logger = structlog.get_logger()

TOOL_NAME = "critique-code"
DEFAULT_USER_GOAL = "Analyze code for issues and suggest improvements"
MCP_HTTP_PATH = "/mcp"


@dataclass(frozen=True)
class CritiqueCodeTool:
    usecase: CritiqueCodeUseCase

    async def run(
        self,
        code: str,
        language: str,
        framework: str | None = None,
        user_goal: str | None = None,
    ) -> str:
        logger.info(
            "Code critique requested",
            code_length=len(code),
            language=language,
            framework=framework,
            context_endpoint=TOOL_NAME,
        )
        payload = {
            "code": code,
            "context": {
                "language": language,
                "framework": framework,
                "userGoal": user_goal or DEFAULT_USER_GOAL,
            },
        }
        try:
            result = await self.usecase.execute(payload)
        except (ValidationError, APIError) as exc:
            logger.error(
                "Code critique failed",
                error_type=type(exc).__name__,
                error_details=str(exc),
                context_endpoint=TOOL_NAME,
            )
            raise ToolError(getattr(exc, "message", str(exc))) from exc
        return json.dumps(result.model_dump(mode="json"), indent=2)


def create_mcp_server(
    settings: CodeCriticSettings, usecase: CritiqueCodeUseCase | None = None
) -> FastMCP:
    """Server exposing ``critique-code``; over HTTP requests are stateless JSON exchanges."""
    tool = CritiqueCodeTool(usecase or build_critique_usecase(settings))
    server = FastMCP(
        settings.app_name,
        streamable_http_path=MCP_HTTP_PATH,
        stateless_http=True,
        json_response=True,
    )

    @server.tool(name=TOOL_NAME, description="Analyze code for issues and suggest improvements")
    async def critique_code(
        code: str,
        language: str,
        framework: str | None = None,
        userGoal: str | None = None,  # noqa: N803
    ) -> str:
        return await tool.run(code, language, framework, userGoal)

    return server
