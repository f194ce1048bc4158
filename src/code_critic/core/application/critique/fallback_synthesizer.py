from dataclasses import dataclass

from code_critic.core.domain.analysis import (
    AnalysisMetadata,
    ContextAlignment,
    CriticismResult,
    Issue,
)
from code_critic.core.domain.analysis.value_objects import IssueSeverity, IssueType

FALLBACK_SCORE = 5


@dataclass(frozen=True)
class FallbackSynthesizer:
    """Produces a schema-valid, low-confidence critique when no JSON could be extracted."""

    def synthesize(self, code: str, metadata: AnalysisMetadata) -> CriticismResult:
        return CriticismResult(
            overall_score=FALLBACK_SCORE,
            critical_issues=[self._parse_failure_issue(code)],
            suggestions=[],
            alternatives=[],
            context_alignment=ContextAlignment(
                alignment_score=FALLBACK_SCORE,
                goal_analysis="Analysis failed: the model response could not be parsed",
                recommendations=["Try again with a smaller code sample"],
            ),
            analysis_metadata=metadata,
        )

    def _parse_failure_issue(self, code: str) -> Issue:
        return Issue(
            type=IssueType.READABILITY,
            severity=IssueSeverity.MEDIUM,
            line_range=(1, _line_count(code)),
            description="Failed to parse the model response",
            explanation="The AI model returned output that could not be parsed as a JSON analysis",
            fix_suggestion="Please try again or check the code format",
        )


def _line_count(code: str) -> int:
    return max(1, len(code.splitlines()))
