from __future__ import annotations

from typing import Any

import httpx
import structlog

from code_critic.core.application.ports import CompletionClient
from code_critic.core.exceptions import APIError
from code_critic.infrastructure.adapters.llm.mappers import (
    ChatCompletionRequestMapper,
    ChatCompletionResponseMapper,
)
from code_critic.infrastructure.configuration import CodeCriticSettings

logger = structlog.get_logger()

HEALTH_CHECK_TIMEOUT_S = 5.0


class ChatCompletionClient(CompletionClient):
    """One POST to ``{base_url}/chat/completions`` per analysis. No retries."""

    def __init__(
        self,
        settings: CodeCriticSettings,
        request_mapper: ChatCompletionRequestMapper | None = None,
        response_mapper: ChatCompletionResponseMapper | None = None,
    ) -> None:
        self.base_url = settings.together_api_url.rstrip("/")
        self.model = settings.deepseek_model
        self.timeout = settings.analysis_timeout_s
        self._api_key = settings.together_api_key
        self.request_mapper = request_mapper or ChatCompletionRequestMapper(model=self.model)
        self.response_mapper = response_mapper or ChatCompletionResponseMapper()

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        url = f"{self.base_url}/chat/completions"
        payload = self.request_mapper.to_payload(system_prompt, user_prompt)
        logger.debug("POST chat completion", context_endpoint=url, timeout_s=self.timeout)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, headers=self._get_headers(), json=payload)
        except httpx.TimeoutException as exc:
            message = f"Completion API error: request timed out after {self.timeout}s"
            raise self._fail(message, 500, exc) from exc
        except httpx.HTTPError as exc:
            raise self._fail(f"Completion API error: {exc}", 500, exc) from exc

        body = self._json(response)
        if not response.is_success:
            detail = self.response_mapper.error_message(body) or response.reason_phrase
            raise self._fail(f"Completion API error: {detail}", response.status_code)
        if body is None:
            raise self._fail("Completion API error: response body is not valid JSON", 500)
        try:
            return self.response_mapper.to_content(body)
        except APIError as exc:
            raise self._fail(exc.message, exc.status, exc) from exc

    async def health_check(self) -> bool:
        url = f"{self.base_url}/models"
        try:
            async with httpx.AsyncClient(timeout=HEALTH_CHECK_TIMEOUT_S) as client:
                response = await client.get(url, headers=self._get_headers())
        except httpx.HTTPError as exc:
            logger.error(
                "Completion provider health check failed",
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            return False
        return response.status_code == 200

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def _fail(self, message: str, status: int, cause: Exception | None = None) -> APIError:
        logger.error(
            "Completion API call failed",
            processing_status="ERROR",
            error_type=type(cause).__name__ if cause else "APIError",
            error_code=status,
            error_details=message,
        )
        return APIError(message, status=status)
