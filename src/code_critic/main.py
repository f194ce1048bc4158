import uvicorn

from code_critic.infrastructure.configuration import load_settings
from code_critic.infrastructure.entrypoints.api import create_app
from code_critic.infrastructure.entrypoints.mcp import create_mcp_server
from code_critic.infrastructure.observability import configure_logging


def dev():
    """Run the development server."""
    settings = load_settings()
    uvicorn.run(
        "code_critic.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )


def mcp_stdio():
    """Serve the critique-code tool over MCP stdio."""
    settings = load_settings()
    configure_logging(settings.log_level)
    create_mcp_server(settings).run()


def __getattr__(name: str):
    # ASGI app is built on first access; importing this module needs no credentials
    if name == "app":
        return create_app(load_settings())
    raise AttributeError(name)
