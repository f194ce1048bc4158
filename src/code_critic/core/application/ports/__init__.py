from code_critic.core.application.ports.completion_client import CompletionClient

__all__ = ["CompletionClient"]
