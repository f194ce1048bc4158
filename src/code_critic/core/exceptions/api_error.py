from __future__ import annotations

from code_critic.core.exceptions.code_critic_error import CodeCriticError


class APIError(CodeCriticError):
    """Raised when the remote completion call fails."""

    def __init__(self, message: str, status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return f"{self.message} status={self.status}"
