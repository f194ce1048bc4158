from code_critic.infrastructure.adapters.llm.mappers.chat_completion_request_mapper import (
    ChatCompletionRequestMapper,
    GenerationParams,
)
from code_critic.infrastructure.adapters.llm.mappers.chat_completion_response_mapper import (
    ChatCompletionResponseMapper,
)

__all__ = ["ChatCompletionRequestMapper", "ChatCompletionResponseMapper", "GenerationParams"]
