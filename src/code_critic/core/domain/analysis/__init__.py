from code_critic.core.domain.analysis.analysis_request import (
    AnalysisRequest,
    ChatHistoryEntry,
    CodeContext,
    RelatedFile,
)
from code_critic.core.domain.analysis.criticism_result import (
    Alternative,
    AnalysisMetadata,
    ContextAlignment,
    CriticismResult,
    Issue,
    Suggestion,
)

__all__ = [
    "Alternative",
    "AnalysisMetadata",
    "AnalysisRequest",
    "ChatHistoryEntry",
    "CodeContext",
    "ContextAlignment",
    "CriticismResult",
    "Issue",
    "RelatedFile",
    "Suggestion",
]
