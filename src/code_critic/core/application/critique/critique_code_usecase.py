"""Critique pipeline: Validate -> Prompt -> Call -> Normalize (or Fallback)."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.contextvars import bound_contextvars

from code_critic.core.application.critique.analysis_request_validator import (
    AnalysisRequestValidator,
)
from code_critic.core.application.critique.prompt_templates.code_critique_prompt_builder import (
    CodeCritiquePromptBuilder,
)
from code_critic.core.application.critique.response_normalizer import (
    JsonMissing,
    ResponseNormalizer,
    extract_json_object,
)
from code_critic.core.application.ports import CompletionClient
from code_critic.core.domain.analysis import AnalysisMetadata, AnalysisRequest, CriticismResult

logger = structlog.get_logger()


@dataclass(frozen=True)
class CritiqueCodeUseCase:
    """Validate, prompt, call the model once, and normalize what comes back.

    Raises ``ValidationError`` before any network activity and ``APIError`` when
    the remote call fails. Once the call succeeds a result is always returned.
    """

    client: CompletionClient
    validator: AnalysisRequestValidator
    model_name: str
    prompt_builder: CodeCritiquePromptBuilder = field(default_factory=CodeCritiquePromptBuilder)
    normalizer: ResponseNormalizer = field(default_factory=ResponseNormalizer)

    async def execute(self, payload: AnalysisRequest | Mapping[str, Any]) -> CriticismResult:
        start = time.perf_counter()
        request = self.validator.validate(payload)
        with bound_contextvars(event_type="pipeline.critique", model=self.model_name):
            return await self._run(request, start)

    async def _run(self, request: AnalysisRequest, start: float) -> CriticismResult:
        system_prompt = self.prompt_builder.build_system_prompt()
        user_prompt = self.prompt_builder.build_user_prompt(request)
        logger.info(
            "Sending analysis request",
            code_length=len(request.code),
            language=request.context.language,
        )
        raw = await self.client.complete(system_prompt, user_prompt)

        extraction = extract_json_object(raw)
        result = self.normalizer.resolve(extraction, request.code, self._metadata(start))
        if isinstance(extraction, JsonMissing):
            logger.warning(
                "Model response could not be parsed, returning fallback critique",
                processing_status="FALLBACK",
                error_type="ResponseParseError",
                error_details=extraction.reason,
                raw_preview=raw[:200],
            )
        else:
            logger.info(
                "Analysis completed",
                processing_status="SUCCESS",
                processing_duration_ms=result.analysis_metadata.analysis_time_ms,
                overall_score=result.overall_score,
                critical_issues=len(result.critical_issues),
                suggestions=len(result.suggestions),
            )
        return result

    def _metadata(self, start: float) -> AnalysisMetadata:
        return AnalysisMetadata(
            analysis_time_ms=max(0, int((time.perf_counter() - start) * 1000)),
            model_used=self.model_name,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
