from code_critic.core.exceptions.code_critic_error import CodeCriticError


class ConfigurationError(CodeCriticError):
    """Raised when configuration is invalid or incomplete."""
