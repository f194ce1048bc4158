from code_critic.core.exceptions.api_error import APIError
from code_critic.core.exceptions.code_critic_error import CodeCriticError
from code_critic.core.exceptions.configuration_error import ConfigurationError
from code_critic.core.exceptions.validation_error import ValidationError

__all__ = ["APIError", "CodeCriticError", "ConfigurationError", "ValidationError"]
