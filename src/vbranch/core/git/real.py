"""Production Repository implementation using git via subprocess."""

import logging
import subprocess
from pathlib import Path

from vbranch.core.errors import MergeConflictError
from vbranch.core.git.abc import Repository
from vbranch.core.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealRepository(Repository):
    """Production implementation using subprocess.

    All operations execute actual git commands via subprocess.
    """

    def list_branch_names(self, repo_root: Path, remote: str) -> set[str]:
        """List branch names on the remote using git ls-remote."""
        result = run_subprocess_with_context(
            ["git", "ls-remote", "--heads", "--end-of-options", remote],
            operation_context=f"list branches on remote '{remote}'",
            cwd=repo_root,
        )

        branches: set[str] = set()
        for line in result.stdout.splitlines():
            parts = line.split("\t", maxsplit=1)
            if len(parts) != 2:
                continue
            ref = parts[1].strip()
            if ref.startswith("refs/heads/"):
                branches.add(ref.removeprefix("refs/heads/"))
        return branches

    def get_current_branch(self, repo_root: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if branch == "HEAD":
            return None

        return branch

    def checkout_branch(self, repo_root: Path, branch: str) -> None:
        """Checkout a branch."""
        run_subprocess_with_context(
            ["git", "checkout", "--quiet", "--end-of-options", branch],
            operation_context=f"checkout branch '{branch}'",
            cwd=repo_root,
        )

    def fetch_remote_ref(self, repo_root: Path, remote: str, refspec: str) -> None:
        """Fetch a refspec from the remote."""
        run_subprocess_with_context(
            ["git", "fetch", "--quiet", "--end-of-options", remote, refspec],
            operation_context=f"fetch '{refspec}' from remote '{remote}'",
            cwd=repo_root,
        )

    def _local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        result = subprocess.run(
            ["git", "show-ref", "--verify", "--quiet", f"refs/heads/{branch}"],
            cwd=repo_root,
            capture_output=True,
            check=False,
        )
        return result.returncode == 0

    def ensure_branch(self, repo_root: Path, branch: str, start_point: str) -> bool:
        """Create branch at start_point if it does not exist locally."""
        if self._local_branch_exists(repo_root, branch):
            return False

        run_subprocess_with_context(
            ["git", "branch", "--no-track", "--end-of-options", branch, start_point],
            operation_context=f"create branch '{branch}' from '{start_point}'",
            cwd=repo_root,
        )
        return True

    def _head_sha(self, repo_root: Path) -> str:
        result = run_subprocess_with_context(
            ["git", "rev-parse", "HEAD"],
            operation_context="resolve HEAD",
            cwd=repo_root,
        )
        return result.stdout.strip()

    def _has_unmerged_paths(self, repo_root: Path) -> bool:
        result = subprocess.run(
            ["git", "diff", "--name-only", "--diff-filter=U"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        return bool(result.stdout.strip())

    def merge_into(self, repo_root: Path, target: str, source: str) -> bool:
        """Checkout target and merge source into it."""
        self.checkout_branch(repo_root, target)
        before = self._head_sha(repo_root)

        result = run_subprocess_with_context(
            ["git", "merge", "--no-edit", "--end-of-options", source],
            operation_context=f"merge '{source}' into '{target}'",
            cwd=repo_root,
            check=False,
        )
        if result.returncode != 0:
            if self._has_unmerged_paths(repo_root) or "CONFLICT" in result.stdout:
                logger.debug("Aborting conflicting merge of %s into %s", source, target)
                run_subprocess_with_context(
                    ["git", "merge", "--abort"],
                    operation_context=f"abort merge of '{source}' into '{target}'",
                    cwd=repo_root,
                )
                raise MergeConflictError(target, source)

            error_msg = f"Failed to merge '{source}' into '{target}'"
            error_msg += f"\nExit code: {result.returncode}"
            if result.stderr.strip():
                error_msg += f"\nstderr: {result.stderr.strip()}"
            raise RuntimeError(error_msg)

        return self._head_sha(repo_root) != before

    def push_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        """Push branch to the remote."""
        run_subprocess_with_context(
            [
                "git",
                "push",
                "--quiet",
                "--end-of-options",
                remote,
                f"refs/heads/{branch}:refs/heads/{branch}",
            ],
            operation_context=f"push branch '{branch}' to remote '{remote}'",
            cwd=repo_root,
        )
