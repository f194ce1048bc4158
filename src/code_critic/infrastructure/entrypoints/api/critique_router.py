from datetime import datetime, timezone
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from code_critic.core.application.critique import CritiqueCodeUseCase
from code_critic.core.exceptions import APIError, ValidationError
from code_critic.infrastructure.entrypoints.api.dependencies import get_usecase
from code_critic.infrastructure.entrypoints.api.health_router import service_version

logger = structlog.get_logger()
router = APIRouter()

_ENDPOINT = "/api/critique"


@router.post(_ENDPOINT, response_model=None)
async def critique_code(
    request: Request, usecase: CritiqueCodeUseCase = Depends(get_usecase)
) -> dict[str, Any] | JSONResponse:
    body = await _read_body(request)
    if not isinstance(body, dict) or not body.get("code") or not body.get("context"):
        return _error(status.HTTP_400_BAD_REQUEST, "Missing required fields: code and context")

    try:
        result = await usecase.execute(body)
    except ValidationError as exc:
        logger.warning(
            "Invalid analysis request",
            error_type="ValidationError",
            error_details=str(exc),
            context_endpoint=_ENDPOINT,
        )
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except APIError as exc:
        logger.error(
            "Upstream analysis failed",
            error_type="APIError",
            error_code=exc.status,
            error_details=exc.message,
            context_endpoint=_ENDPOINT,
        )
        return _error(status.HTTP_502_BAD_GATEWAY, exc.message)

    return {
        "success": True,
        "data": result.model_dump(mode="json"),
        "message": "Code analysis completed successfully",
    }


@router.get(_ENDPOINT)
async def critique_health(usecase: CritiqueCodeUseCase = Depends(get_usecase)) -> dict[str, str]:
    healthy = await usecase.client.health_check()
    return {
        "status": "healthy" if healthy else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "Code Critic",
        "version": service_version(),
        "api": "critique",
        "mcp": "Available at /api/mcp endpoint",
    }


async def _read_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})
