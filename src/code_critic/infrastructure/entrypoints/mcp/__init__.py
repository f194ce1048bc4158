from code_critic.infrastructure.entrypoints.mcp.critique_code_tool import (
    CritiqueCodeTool,
    create_mcp_server,
)

__all__ = ["CritiqueCodeTool", "create_mcp_server"]
