from code_critic.core.application.critique import FallbackSynthesizer
from code_critic.core.domain.analysis import AnalysisMetadata
from code_critic.core.domain.analysis.value_objects import IssueSeverity, IssueType

METADATA = AnalysisMetadata(analysis_time_ms=0, model_used="m", timestamp="2024-01-01T00:00:00+00:00")


def test_fallback_has_single_parse_failure_issue_over_whole_code():
    code = "line one\nline two\nline three\nline four"
    result = FallbackSynthesizer().synthesize(code, METADATA)

    assert result.overall_score == 5
    assert len(result.critical_issues) == 1
    issue = result.critical_issues[0]
    assert issue.type is IssueType.READABILITY
    assert issue.severity is IssueSeverity.MEDIUM
    assert issue.line_range == (1, 4)
    assert "parse" in issue.description.lower()
    assert "try again" in issue.fix_suggestion.lower()


def test_fallback_alignment_recommends_retry():
    result = FallbackSynthesizer().synthesize("x", METADATA)

    assert result.suggestions == []
    assert result.alternatives == []
    assert result.context_alignment.alignment_score == 5
    assert "failed" in result.context_alignment.goal_analysis.lower()
    assert result.context_alignment.recommendations == ["Try again with a smaller code sample"]
    assert result.analysis_metadata == METADATA


def test_single_line_code_spans_one_line():
    result = FallbackSynthesizer().synthesize("x = 1", METADATA)
    assert result.critical_issues[0].line_range == (1, 1)
