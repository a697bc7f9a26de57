"""Production implementation of GitHub issues using gh CLI."""

import json
from pathlib import Path

from vbranch.core.github.issues.abc import GitHubIssues
from vbranch.core.github.issues.types import IssueInfo, IssuePage
from vbranch.core.subprocess_utils import execute_gh_command


class RealGitHubIssues(GitHubIssues):
    """Production implementation using gh CLI.

    All GitHub issue operations execute actual gh commands via subprocess.
    """

    def __init__(self, owner: str | None = None, repository: str | None = None) -> None:
        """Initialize RealGitHubIssues.

        Args:
            owner: Repository owner. None lets gh resolve {owner} from the checkout.
            repository: Repository name. None lets gh resolve {repo} from the checkout.
        """
        self._owner = owner
        self._repository = repository

    def _issues_endpoint(self) -> str:
        if self._owner is not None and self._repository is not None:
            return f"repos/{self._owner}/{self._repository}/issues"
        return "repos/{owner}/{repo}/issues"

    def get_issue_page(
        self, repo_root: Path, label: str, page: int, per_page: int
    ) -> IssuePage:
        """Fetch one page of open issues using the REST API through gh.

        Raises:
            RuntimeError: If gh fails (not installed, not authenticated) or its
                output is not a JSON array of issues
        """
        cmd = [
            "gh",
            "api",
            "--method",
            "GET",
            self._issues_endpoint(),
            "-f",
            "state=open",
            "-f",
            f"labels={label}",
            "-f",
            "sort=created",
            "-f",
            "direction=asc",
            "-f",
            f"per_page={per_page}",
            "-f",
            f"page={page}",
        ]
        stdout = execute_gh_command(cmd, repo_root)

        try:
            data = json.loads(stdout) if stdout.strip() else []
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            # The issues endpoint also returns pull requests
            issues = [
                IssueInfo(
                    number=item["number"],
                    title=item.get("title") or "",
                    body=item.get("body") or "",
                    url=item.get("html_url") or "",
                    labels=[lbl["name"] for lbl in item.get("labels", [])],
                    state=str(item.get("state", "open")).upper(),
                )
                for item in data
                if "pull_request" not in item
            ]
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            msg = f"Unexpected response from '{' '.join(cmd)}': {e}"
            raise RuntimeError(msg) from e

        # A short page is the last page
        next_page = page + 1 if len(data) >= per_page else None
        return IssuePage(issues=issues, next_page=next_page)
