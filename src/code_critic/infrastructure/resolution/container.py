"""Composition root: turns settings into a ready-to-run critique pipeline."""

from code_critic.core.application.critique import (
    AnalysisRequestValidator,
    CodeCritiquePromptBuilder,
    CritiqueCodeUseCase,
    ResponseNormalizer,
)
from code_critic.core.application.ports import CompletionClient
from code_critic.infrastructure.adapters.llm import ChatCompletionClient
from code_critic.infrastructure.configuration import CodeCriticSettings


def build_completion_client(settings: CodeCriticSettings) -> CompletionClient:
    return ChatCompletionClient(settings)


def build_critique_usecase(
    settings: CodeCriticSettings, client: CompletionClient | None = None
) -> CritiqueCodeUseCase:
    """Assemble the pipeline. A client may be injected to replace the HTTP adapter."""
    return CritiqueCodeUseCase(
        client=client or build_completion_client(settings),
        validator=AnalysisRequestValidator(max_code_length=settings.max_code_length),
        model_name=settings.deepseek_model,
        prompt_builder=CodeCritiquePromptBuilder(),
        normalizer=ResponseNormalizer(),
    )
