from abc import ABC, abstractmethod


class CompletionClient(ABC):
    """Port for the remote chat-completion provider."""

    @abstractmethod
    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Return the raw text of the first choice. Raises APIError on failure."""

    @abstractmethod
    async def health_check(self) -> bool:
        """Return True when the provider answers; never raises."""
