"""In-memory fake Repository implementation for testing."""

from pathlib import Path

from vbranch.core.errors import MergeConflictError
from vbranch.core.git.abc import Repository


class FakeRepository(Repository):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments. Remote
    branches are tracked by name; fetching a branch makes '<remote>/<name>'
    available as a ref for ensure_branch and merge_into.
    """

    def __init__(
        self,
        *,
        remote_branches: set[str] | None = None,
        local_branches: set[str] | None = None,
        current_branch: str | None = "main",
        conflicts: set[tuple[str, str]] | None = None,
        list_branches_error: Exception | None = None,
        fetch_errors: dict[str, Exception] | None = None,
        push_errors: dict[str, Exception] | None = None,
        checkout_errors: dict[str, Exception] | None = None,
    ) -> None:
        """Create FakeRepository with pre-configured state.

        Args:
            remote_branches: Branch names that exist on every remote
            local_branches: Local branch names (defaults to {current_branch})
            current_branch: Checked-out branch (None means detached HEAD)
            conflicts: (target, source) pairs whose merge conflicts
            list_branches_error: Raised by list_branch_names if set
            fetch_errors: Branch name -> error raised when fetching it
            push_errors: Branch name -> error raised when pushing it
            checkout_errors: Branch name -> error raised when checking it out
        """
        self._remote_branches = set(remote_branches or set())
        if local_branches is None:
            local_branches = {current_branch} if current_branch is not None else set()
        self._local_branches = set(local_branches)
        self._current_branch = current_branch
        self._conflicts = conflicts or set()
        self._list_branches_error = list_branches_error
        self._fetch_errors = fetch_errors or {}
        self._push_errors = push_errors or {}
        self._checkout_errors = checkout_errors or {}
        self._remote_tracking: set[str] = set()
        self._merged: set[tuple[str, str]] = set()

        self._fetched_refspecs: list[str] = []
        self._created_branches: list[tuple[str, str]] = []
        self._merges: list[tuple[str, str]] = []
        self._pushed_branches: list[tuple[str, str]] = []
        self._checked_out: list[str] = []

    @property
    def fetched_refspecs(self) -> list[str]:
        """Read-only access to fetched refspecs for test assertions."""
        return self._fetched_refspecs

    @property
    def created_branches(self) -> list[tuple[str, str]]:
        """Read-only access to created branches.

        Returns list of (branch, start_point) tuples.
        """
        return self._created_branches

    @property
    def merges(self) -> list[tuple[str, str]]:
        """Read-only access to merges that produced a commit.

        Returns list of (target, source) tuples.
        """
        return self._merges

    @property
    def pushed_branches(self) -> list[tuple[str, str]]:
        """Read-only access to pushes.

        Returns list of (remote, branch) tuples.
        """
        return self._pushed_branches

    @property
    def checked_out(self) -> list[str]:
        """Read-only access to checked out branches, in order."""
        return self._checked_out

    @property
    def local_branches(self) -> set[str]:
        return self._local_branches.copy()

    @property
    def remote_branches(self) -> set[str]:
        return self._remote_branches.copy()

    def list_branch_names(self, repo_root: Path, remote: str) -> set[str]:
        if self._list_branches_error is not None:
            raise self._list_branches_error
        return self._remote_branches.copy()

    def get_current_branch(self, repo_root: Path) -> str | None:
        return self._current_branch

    def checkout_branch(self, repo_root: Path, branch: str) -> None:
        """Checkout branch in fake storage.

        Raises:
            RuntimeError: If the branch does not exist locally
        """
        if branch in self._checkout_errors:
            raise self._checkout_errors[branch]
        if branch not in self._local_branches:
            msg = f"Failed to checkout branch '{branch}': no such branch"
            raise RuntimeError(msg)
        self._current_branch = branch
        self._checked_out.append(branch)

    def fetch_remote_ref(self, repo_root: Path, remote: str, refspec: str) -> None:
        """Fetch a '+refs/heads/<b>:refs/remotes/<remote>/<b>' refspec.

        Raises:
            RuntimeError: If the branch is not on the remote (simulates git error)
        """
        source = refspec.lstrip("+").split(":", maxsplit=1)[0]
        branch = source.removeprefix("refs/heads/")
        if branch in self._fetch_errors:
            raise self._fetch_errors[branch]
        if branch not in self._remote_branches:
            msg = f"Failed to fetch '{refspec}': couldn't find remote ref {source}"
            raise RuntimeError(msg)
        self._remote_tracking.add(f"{remote}/{branch}")
        self._fetched_refspecs.append(refspec)

    def ensure_branch(self, repo_root: Path, branch: str, start_point: str) -> bool:
        """Create branch unless present.

        Raises:
            RuntimeError: If start_point is not a known ref
        """
        if branch in self._local_branches:
            return False
        if start_point not in self._remote_tracking and start_point not in self._local_branches:
            msg = f"Failed to create branch '{branch}': not a valid ref: {start_point}"
            raise RuntimeError(msg)
        self._local_branches.add(branch)
        self._created_branches.append((branch, start_point))
        return True

    def merge_into(self, repo_root: Path, target: str, source: str) -> bool:
        """Merge source into target.

        Returns False when the same pair has been merged before.

        Raises:
            MergeConflictError: If (target, source) is configured to conflict
            RuntimeError: If target or source is unknown
        """
        self.checkout_branch(repo_root, target)
        if source not in self._remote_tracking and source not in self._local_branches:
            msg = f"Failed to merge '{source}' into '{target}': not something we can merge"
            raise RuntimeError(msg)
        if (target, source) in self._conflicts:
            raise MergeConflictError(target, source)
        if (target, source) in self._merged:
            return False
        self._merged.add((target, source))
        self._merges.append((target, source))
        return True

    def push_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        if branch in self._push_errors:
            raise self._push_errors[branch]
        if branch not in self._local_branches:
            msg = f"Failed to push branch '{branch}': src refspec does not match any"
            raise RuntimeError(msg)
        self._remote_branches.add(branch)
        # Remote copy now matches local, so merging it back is a no-op
        self._merged.add((branch, f"{remote}/{branch}"))
        self._pushed_branches.append((remote, branch))
