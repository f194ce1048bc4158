from code_critic.core.exceptions.code_critic_error import CodeCriticError


class ValidationError(CodeCriticError):
    """Raised when an analysis request is malformed or oversized."""
