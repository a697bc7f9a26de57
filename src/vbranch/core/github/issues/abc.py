"""Abstract interface for GitHub issue operations."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from vbranch.core.github.issues.types import IssueInfo, IssuePage

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 100


class GitHubIssues(ABC):
    """Abstract interface for GitHub issue operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_issue_page(
        self, repo_root: Path, label: str, page: int, per_page: int
    ) -> IssuePage:
        """Fetch one page of open issues carrying label, oldest first.

        Pull requests are never included.

        Args:
            repo_root: Repository root directory
            label: Label every returned issue must carry
            page: 1-based page number
            per_page: Maximum number of results per page

        Returns:
            IssuePage with the issues and the next page number (None on the last page)

        Raises:
            RuntimeError: If gh CLI fails (not installed, not authenticated, or command error)
        """
        ...

    def iter_open_issues(
        self, repo_root: Path, label: str, *, per_page: int = DEFAULT_PER_PAGE
    ) -> Iterator[IssueInfo]:
        """Lazily yield every open issue carrying label, across all pages.

        Raises:
            RuntimeError: If fetching any page fails
        """
        page: int | None = 1
        while page is not None:
            result = self.get_issue_page(repo_root, label, page, per_page)
            logger.debug(
                "Fetched issue page %d for label %r: %d issues", page, label, len(result.issues)
            )
            yield from result.issues
            page = result.next_page
