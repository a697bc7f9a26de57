"""Dry-run Repository wrapper.

Read-only operations and fetches are delegated to the wrapped
implementation. Fetching only updates remote-tracking refs, so it is treated
as read-only here. Operations that create branches, make commits or push
print what would happen instead.
"""

from pathlib import Path

from vbranch.cli.output import user_output
from vbranch.core.git.abc import Repository


class DryRunRepository(Repository):
    """Wrapper that prevents mutating operations from executing.

    Usage:
        real_ops = RealRepository()
        dry_run_ops = DryRunRepository(real_ops)

        # Prints message instead of creating the branch
        dry_run_ops.ensure_branch(repo_root, "feature-combined", "origin/main")
    """

    def __init__(self, wrapped: Repository) -> None:
        """Create a dry-run wrapper around a Repository implementation.

        Args:
            wrapped: The Repository implementation to wrap (usually RealRepository)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def list_branch_names(self, repo_root: Path, remote: str) -> set[str]:
        return self._wrapped.list_branch_names(repo_root, remote)

    def get_current_branch(self, repo_root: Path) -> str | None:
        return self._wrapped.get_current_branch(repo_root)

    def checkout_branch(self, repo_root: Path, branch: str) -> None:
        """No-op: nothing was checked out, so there is nothing to restore."""

    def fetch_remote_ref(self, repo_root: Path, remote: str, refspec: str) -> None:
        self._wrapped.fetch_remote_ref(repo_root, remote, refspec)

    # Mutating operations: print instead of executing

    def ensure_branch(self, repo_root: Path, branch: str, start_point: str) -> bool:
        user_output(f"[DRY RUN] Would ensure branch {branch} exists (from {start_point})")
        return False

    def merge_into(self, repo_root: Path, target: str, source: str) -> bool:
        user_output(f"[DRY RUN] Would merge {source} into {target}")
        return False

    def push_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        user_output(f"[DRY RUN] Would push {branch} to {remote}")
