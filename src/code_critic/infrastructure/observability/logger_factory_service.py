"""Process-wide log setup for the critic API and the MCP stdio server.

All output goes to stderr: stdout is the MCP stdio transport and must carry
protocol frames only. ``LOG_LEVEL`` filters both structlog loggers and the
stdlib loggers of third-party libraries (httpx, uvicorn, mcp).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import FilteringBoundLogger

from code_critic.infrastructure.observability.logging.critic_schema_processor import (
    critic_schema_processor,
)
from code_critic.infrastructure.observability.redaction_service import redaction_processor

_CONFIGURED = False

_JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")


def configure_logging(log_level: str = "INFO") -> None:
    """Install the critic pipeline once; later calls are no-ops."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = _level(log_level)
    renderer = _select_renderer()
    processors = _event_processors()

    structlog.configure(
        processors=[*processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _bridge_stdlib(processors, renderer, level)


def get_logger(component: str) -> FilteringBoundLogger:
    """Logger tagged with the ``context.component`` of the critic log schema."""
    return structlog.get_logger().bind(context_component=component)


def _event_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redaction_processor,
        critic_schema_processor,
    ]


def _bridge_stdlib(processors: list[Any], renderer: Any, level: int) -> None:
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *processors,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _select_renderer() -> Any:
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format in ("json", "console"):
        use_json = log_format == "json"
    else:
        use_json = os.environ.get("APP_ENV", "local").lower() in _JSON_ENVIRONMENTS
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)
