from code_critic.core.application.critique.analysis_request_validator import (
    AnalysisRequestValidator,
)
from code_critic.core.application.critique.critique_code_usecase import CritiqueCodeUseCase
from code_critic.core.application.critique.fallback_synthesizer import FallbackSynthesizer
from code_critic.core.application.critique.prompt_templates.code_critique_prompt_builder import (
    CodeCritiquePromptBuilder,
)
from code_critic.core.application.critique.response_normalizer import (
    JsonExtracted,
    JsonMissing,
    ResponseNormalizer,
    extract_json_object,
)

__all__ = [
    "AnalysisRequestValidator",
    "CodeCritiquePromptBuilder",
    "CritiqueCodeUseCase",
    "FallbackSynthesizer",
    "JsonExtracted",
    "JsonMissing",
    "ResponseNormalizer",
    "extract_json_object",
]
