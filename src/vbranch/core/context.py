"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from vbranch.core.git.abc import Repository
from vbranch.core.git.dry_run import DryRunRepository
from vbranch.core.git.real import RealRepository
from vbranch.core.github.issues.abc import GitHubIssues
from vbranch.core.github.issues.real import RealGitHubIssues
from vbranch.core.provider import GitHubProvider
from vbranch.core.settings import VirtualBranchSettings, load_settings


@dataclass(frozen=True)
class NoRepoSentinel:
    """Sentinel value indicating execution outside a git repository."""

    message: str = "Not inside a git repository"


def discover_repo_root(cwd: Path) -> Path | NoRepoSentinel:
    """Walk up from cwd to the first directory containing `.git`.

    `.git` may be a directory (regular checkout) or a file (worktree or submodule).
    """
    if not cwd.exists():
        return NoRepoSentinel(message=f"Start path '{cwd}' does not exist")

    cur = cwd.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / ".git").exists():
            return parent
    return NoRepoSentinel(message="Not inside a git repository (no .git found up the tree)")


@dataclass(frozen=True)
class VbranchContext:
    """Immutable context holding all dependencies for vbranch operations.

    Created at CLI entry point and threaded through the application.
    """

    repository: Repository
    issues: GitHubIssues
    settings: VirtualBranchSettings
    cwd: Path
    repo_root: Path | NoRepoSentinel
    dry_run: bool

    def provider(self, repo_root: Path) -> GitHubProvider:
        """Build the provider for this context's collaborators and settings."""
        return GitHubProvider(self.issues, self.repository, self.settings, repo_root)

    def with_settings(self, settings: VirtualBranchSettings) -> "VbranchContext":
        return VbranchContext(
            repository=self.repository,
            issues=self.issues,
            settings=settings,
            cwd=self.cwd,
            repo_root=self.repo_root,
            dry_run=self.dry_run,
        )

    def with_dry_run(self) -> "VbranchContext":
        """Return a context whose repository only prints mutating operations."""
        if self.dry_run:
            return self
        return VbranchContext(
            repository=DryRunRepository(self.repository),
            issues=self.issues,
            settings=self.settings,
            cwd=self.cwd,
            repo_root=self.repo_root,
            dry_run=True,
        )

    @staticmethod
    def for_test(
        repository: Repository | None = None,
        issues: GitHubIssues | None = None,
        settings: VirtualBranchSettings | None = None,
        cwd: Path | None = None,
        repo_root: Path | NoRepoSentinel | None = None,
        dry_run: bool = False,
    ) -> "VbranchContext":
        """Create test context with in-memory fakes for anything not provided.

        Args:
            repository: Optional Repository. If None, creates empty FakeRepository.
            issues: Optional GitHubIssues. If None, creates empty FakeGitHubIssues.
            settings: Optional settings. If None, uses defaults.
            cwd: Optional current working directory. If None, uses Path("/test/repo").
            repo_root: Optional repo root. If None, uses cwd.
            dry_run: Whether to wrap the repository in DryRunRepository.

        Example:
            >>> repository = FakeRepository(remote_branches={"main", "a"})
            >>> ctx = VbranchContext.for_test(repository=repository)
        """
        from vbranch.core.git.fake import FakeRepository
        from vbranch.core.github.issues.fake import FakeGitHubIssues

        if repository is None:
            repository = FakeRepository()
        if issues is None:
            issues = FakeGitHubIssues()
        if settings is None:
            settings = VirtualBranchSettings()
        if cwd is None:
            cwd = Path("/test/repo")
        if repo_root is None:
            repo_root = cwd
        if dry_run:
            repository = DryRunRepository(repository)

        return VbranchContext(
            repository=repository,
            issues=issues,
            settings=settings,
            cwd=cwd,
            repo_root=repo_root,
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, cwd: Path | None = None) -> VbranchContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Raises:
        ValueError: If [tool.vbranch] in pyproject.toml is invalid
    """
    if cwd is None:
        cwd = Path.cwd()

    repo_root = discover_repo_root(cwd)
    if isinstance(repo_root, NoRepoSentinel):
        settings = VirtualBranchSettings()
    else:
        settings = load_settings(repo_root)

    repository: Repository = RealRepository()
    if dry_run:
        repository = DryRunRepository(repository)

    return VbranchContext(
        repository=repository,
        issues=RealGitHubIssues(owner=settings.owner, repository=settings.repository),
        settings=settings,
        cwd=cwd,
        repo_root=repo_root,
        dry_run=dry_run,
    )
