import json
import logging

import pytest
import structlog

from code_critic.infrastructure.observability import logger_factory_service
from code_critic.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)


@pytest.fixture
def fresh_logging(monkeypatch):
    saved = structlog.get_config()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setattr(logger_factory_service, "_CONFIGURED", False)
    monkeypatch.setenv("LOG_FORMAT", "json")
    yield
    structlog.configure(**saved)
    root.handlers[:] = handlers
    root.setLevel(level)


def _lines(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


def test_log_level_filters_structlog_events(fresh_logging, capsys):
    configure_logging("WARNING")
    logger = structlog.get_logger()

    logger.debug("hidden debug line")
    logger.info("hidden info line")
    logger.warning("visible warning line")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert [entry["message"] for entry in _lines(err)] == ["visible warning line"]


def test_log_level_filters_stdlib_loggers(fresh_logging, capsys):
    configure_logging("ERROR")

    logging.getLogger("httpx").warning("hidden third-party warning")
    logging.getLogger("httpx").error("visible third-party error")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "visible third-party error" in err


def test_events_are_reshaped_and_redacted(fresh_logging, capsys):
    configure_logging("DEBUG")

    get_logger("critique_pipeline").info("calling upstream", api_key="sk-live", code_length=3)

    (entry,) = _lines(capsys.readouterr().err)
    assert entry["message"] == "calling upstream"
    assert entry["level"] == "info"
    assert entry["context"]["component"] == "critique_pipeline"
    assert entry["extra"] == {"api_key": "[REDACTED]", "code_length": 3}


def test_configuration_happens_once(fresh_logging, capsys):
    configure_logging("ERROR")
    configure_logging("DEBUG")

    structlog.get_logger().info("hidden info line")

    assert "hidden" not in capsys.readouterr().err


def test_unknown_level_name_falls_back_to_info():
    assert logger_factory_service._level("chatty") == logging.INFO
    assert logger_factory_service._level("warning") == logging.WARNING
