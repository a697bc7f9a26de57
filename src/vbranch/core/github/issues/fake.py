"""In-memory fake implementation of GitHub issues for testing."""

from pathlib import Path

from vbranch.core.github.issues.abc import GitHubIssues
from vbranch.core.github.issues.types import IssueInfo, IssuePage


class FakeGitHubIssues(GitHubIssues):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        issues: dict[int, IssueInfo] | None = None,
        page_errors: dict[int, Exception] | None = None,
    ) -> None:
        """Create FakeGitHubIssues with pre-configured state.

        Args:
            issues: Mapping of issue number -> IssueInfo
            page_errors: Mapping of page number -> error raised when that page is requested
        """
        self._issues = issues or {}
        self._page_errors = page_errors or {}
        self._requested_pages: list[tuple[str, int]] = []

    @property
    def requested_pages(self) -> list[tuple[str, int]]:
        """Read-only access to requested pages for test assertions.

        Returns list of (label, page) tuples.
        """
        return self._requested_pages

    def get_issue_page(
        self, repo_root: Path, label: str, page: int, per_page: int
    ) -> IssuePage:
        """Return one page of matching issues ordered by issue number.

        Raises:
            RuntimeError: If configured via page_errors (simulates gh CLI error)
        """
        self._requested_pages.append((label, page))
        if page in self._page_errors:
            raise self._page_errors[page]

        matching = [
            issue
            for _, issue in sorted(self._issues.items())
            if issue.state.upper() == "OPEN" and label in issue.labels
        ]
        start = (page - 1) * per_page
        page_issues = matching[start : start + per_page]
        next_page = page + 1 if len(page_issues) == per_page else None
        return IssuePage(issues=page_issues, next_page=next_page)
