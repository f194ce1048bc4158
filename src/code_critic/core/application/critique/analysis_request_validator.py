from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from code_critic.core.domain.analysis import AnalysisRequest
from code_critic.core.exceptions import ValidationError


@dataclass(frozen=True)
class AnalysisRequestValidator:
    """Input contract for the critique pipeline.

    Turns a raw payload (or an already built request) into an immutable
    ``AnalysisRequest`` and rejects anything the prompt builder must never see.
    """

    max_code_length: int

    def validate(self, payload: AnalysisRequest | Mapping[str, Any]) -> AnalysisRequest:
        request = payload if isinstance(payload, AnalysisRequest) else self._parse(payload)
        self._require_text(request.code, "code")
        self._require_text(request.context.language, "context.language")
        self._require_text(request.context.user_goal, "context.userGoal")
        if len(request.code) > self.max_code_length:
            raise ValidationError(
                f"Code length exceeds maximum allowed length of {self.max_code_length} characters"
            )
        return request

    def _parse(self, payload: Any) -> AnalysisRequest:
        if not isinstance(payload, Mapping):
            raise ValidationError("Analysis request must be a JSON object")
        try:
            return AnalysisRequest.model_validate(dict(payload))
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid analysis request: {_describe(exc)}") from exc

    @staticmethod
    def _require_text(value: str, field: str) -> None:
        if not value.strip():
            raise ValidationError(f"'{field}' must not be empty")


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)
