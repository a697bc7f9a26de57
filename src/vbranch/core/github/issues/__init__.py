"""GitHub issues integration."""

from vbranch.core.github.issues.abc import GitHubIssues
from vbranch.core.github.issues.fake import FakeGitHubIssues
from vbranch.core.github.issues.real import RealGitHubIssues
from vbranch.core.github.issues.types import IssueInfo, IssuePage

__all__ = [
    "GitHubIssues",
    "RealGitHubIssues",
    "FakeGitHubIssues",
    "IssueInfo",
    "IssuePage",
]
