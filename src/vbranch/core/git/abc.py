"""Repository operations needed to reconcile virtual branches.

Architecture:
- Repository: Abstract base class defining the interface
- RealRepository: Production implementation using git via subprocess
- FakeRepository: In-memory implementation for tests
- DryRunRepository: Wrapper that skips mutating operations
"""

from abc import ABC, abstractmethod
from pathlib import Path


def remote_refspec(remote: str, branch: str) -> str:
    """Refspec that force-updates the remote-tracking ref for branch."""
    return f"+refs/heads/{branch}:refs/remotes/{remote}/{branch}"


class Repository(ABC):
    """Abstract interface for repository operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def list_branch_names(self, repo_root: Path, remote: str) -> set[str]:
        """List branch names that exist on the remote.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')

        Returns:
            Set of branch names without remote prefix (e.g., {'main', 'feature-a'})

        Raises:
            RuntimeError: If the remote cannot be queried
        """
        ...

    @abstractmethod
    def get_current_branch(self, repo_root: Path) -> str | None:
        """Get the currently checked-out branch (None when HEAD is detached)."""
        ...

    @abstractmethod
    def checkout_branch(self, repo_root: Path, branch: str) -> None:
        """Checkout an existing local branch.

        Raises:
            RuntimeError: If the checkout fails
        """
        ...

    @abstractmethod
    def fetch_remote_ref(self, repo_root: Path, remote: str, refspec: str) -> None:
        """Fetch a single refspec from the remote.

        Args:
            repo_root: Path to the repository root
            remote: Remote name
            refspec: Refspec to fetch (see remote_refspec)

        Raises:
            RuntimeError: If the fetch fails
        """
        ...

    @abstractmethod
    def ensure_branch(self, repo_root: Path, branch: str, start_point: str) -> bool:
        """Create a local branch at start_point unless it already exists.

        Args:
            repo_root: Path to the repository root
            branch: Local branch name
            start_point: Ref to create the branch from (e.g., 'origin/main')

        Returns:
            True if the branch was created, False if it already existed

        Raises:
            RuntimeError: If branch creation fails
        """
        ...

    @abstractmethod
    def merge_into(self, repo_root: Path, target: str, source: str) -> bool:
        """Merge source into the local target branch.

        Leaves target checked out. A conflicting merge is aborted so the
        working tree is clean for the next configuration.

        Returns:
            True if the merge produced a new commit, False if already up to date

        Raises:
            MergeConflictError: If the merge conflicts
            RuntimeError: If git fails for another reason
        """
        ...

    @abstractmethod
    def push_branch(self, repo_root: Path, remote: str, branch: str) -> None:
        """Push a local branch to the same name on the remote.

        Raises:
            RuntimeError: If the push fails
        """
        ...
