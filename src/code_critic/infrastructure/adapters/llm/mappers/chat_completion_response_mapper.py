from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from code_critic.core.exceptions import APIError


@dataclass(frozen=True)
class ChatCompletionResponseMapper:
    def to_content(self, body: Any) -> str:
        message = self._message(body)
        content = message.get("content") if isinstance(message, dict) else None
        return content if isinstance(content, str) else ""

    def _message(self, body: Any) -> Any:
        choices = body.get("choices") if isinstance(body, dict) else None
        if not isinstance(choices, list) or not choices:
            raise APIError("No response from model")
        first = choices[0]
        return first.get("message") if isinstance(first, dict) else None

    def error_message(self, body: Any) -> str | None:
        """Pull ``error.message`` out of an upstream error body, when present."""
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str):
            return error
        return None
