import contextlib
from collections.abc import AsyncIterator

from fastapi import FastAPI

from code_critic.core.application.critique import CritiqueCodeUseCase
from code_critic.infrastructure.configuration import CodeCriticSettings
from code_critic.infrastructure.entrypoints.api.critique_router import router as critique_router
from code_critic.infrastructure.entrypoints.api.health_router import router as health_router
from code_critic.infrastructure.entrypoints.mcp import create_mcp_server
from code_critic.infrastructure.observability import configure_logging, get_logger
from code_critic.infrastructure.resolution import build_critique_usecase

logger = get_logger(__name__)

API_PREFIX = "/api"


def create_app(settings: CodeCriticSettings, usecase: CritiqueCodeUseCase | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        model=settings.deepseek_model,
        api_url=settings.together_api_url,
        max_code_length=settings.max_code_length,
    )

    usecase = usecase or build_critique_usecase(settings)
    mcp_server = create_mcp_server(settings, usecase)
    mcp_app = mcp_server.streamable_http_app()

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with mcp_server.session_manager.run():
            yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.critique_usecase = usecase

    app.include_router(health_router)
    app.include_router(critique_router)
    # mounted last: the prefix would otherwise shadow /api/critique
    app.mount(API_PREFIX, mcp_app)

    return app
