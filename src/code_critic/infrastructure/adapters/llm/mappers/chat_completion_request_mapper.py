from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GenerationParams:
    max_tokens: int = 4000
    temperature: float = 0.3
    top_p: float = 0.9


@dataclass(frozen=True)
class ChatCompletionRequestMapper:
    model: str
    generation: GenerationParams = GenerationParams()

    def to_payload(self, system_prompt: str, user_prompt: str) -> Mapping[str, Any]:
        return {
            "model": self.model,
            "messages": self._messages(system_prompt, user_prompt),
            **self._generation(),
            "stream": False,
        }

    def _messages(self, system_prompt: str, user_prompt: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

    def _generation(self) -> Mapping[str, Any]:
        g = self.generation
        return {"max_tokens": g.max_tokens, "temperature": g.temperature, "top_p": g.top_p}
