from pydantic import BaseModel, Field

from code_critic.core.domain.analysis.value_objects import IssueSeverity, IssueType

LineRange = tuple[int, int]


class Issue(BaseModel):
    type: IssueType
    severity: IssueSeverity
    line_range: LineRange = (1, 1)
    description: str = ""
    explanation: str = ""
    fix_suggestion: str = ""


class Suggestion(BaseModel):
    type: IssueType
    description: str = ""
    line_range: LineRange = (1, 1)
    impact: str = ""


class Alternative(BaseModel):
    description: str = ""
    code_example: str = ""
    benefits: list[str] = Field(default_factory=list)
    trade_offs: list[str] = Field(default_factory=list)


class ContextAlignment(BaseModel):
    alignment_score: int = Field(ge=1, le=10)
    goal_analysis: str
    recommendations: list[str] = Field(default_factory=list)


class AnalysisMetadata(BaseModel):
    analysis_time_ms: int = Field(ge=0)
    model_used: str
    timestamp: str


class CriticismResult(BaseModel):
    """Structured critique returned to the caller."""

    overall_score: int = Field(ge=1, le=10)
    critical_issues: list[Issue] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    alternatives: list[Alternative] = Field(default_factory=list)
    context_alignment: ContextAlignment
    analysis_metadata: AnalysisMetadata
