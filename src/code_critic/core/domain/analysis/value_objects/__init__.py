from code_critic.core.domain.analysis.value_objects.issue_severity import IssueSeverity
from code_critic.core.domain.analysis.value_objects.issue_type import IssueType

__all__ = ["IssueSeverity", "IssueType"]
