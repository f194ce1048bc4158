from code_critic.infrastructure.adapters.llm.chat_completion_client import ChatCompletionClient

__all__ = ["ChatCompletionClient"]
