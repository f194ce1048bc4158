"""Secret scrubbing for log output: bearer tokens and API keys never reach a log line."""

import re
from typing import Any

_REDACTED = "[REDACTED]"

# (prefix)(secret) pairs; only the secret group is replaced
SECRET_PATTERNS = [
    re.compile(r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"(Authorization:\s*)([a-zA-Z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"(api[_-]?key\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)", re.IGNORECASE),
]

SENSITIVE_KEYS = ("authorization", "api_key", "apikey", "secret", "token")


def redact_text(text: str) -> str:
    """Replace secrets embedded in free text."""
    if not text:
        return text
    for pattern in SECRET_PATTERNS:
        text = pattern.sub(rf"\1{_REDACTED}", text)
    return text


def is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in SENSITIVE_KEYS)


def redact(value: Any, key: str = "") -> Any:
    """Recursively redact *value*; everything under a sensitive *key* is masked."""
    if key and is_sensitive_key(key):
        return _REDACTED
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return {k: redact(v, str(k)) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value


def redaction_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor applying ``redact`` to every field of the event."""
    return {key: redact(value, key) for key, value in event_dict.items()}
