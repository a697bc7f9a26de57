"""Tests for repository discovery and context construction."""

from pathlib import Path

from vbranch.core.context import NoRepoSentinel, VbranchContext, create_context, discover_repo_root
from vbranch.core.git.dry_run import DryRunRepository
from vbranch.core.git.real import RealRepository


def test_discover_repo_root_walks_up(tmp_path: Path) -> None:
    """Test that the nearest ancestor holding .git is found."""
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert discover_repo_root(nested) == tmp_path.resolve()


def test_discover_repo_root_accepts_git_file(tmp_path: Path) -> None:
    """Test that a .git file (worktree) marks the root too."""
    (tmp_path / ".git").write_text("gitdir: /elsewhere\n", encoding="utf-8")

    assert discover_repo_root(tmp_path) == tmp_path.resolve()


def test_discover_repo_root_missing_path(tmp_path: Path) -> None:
    """Test that a nonexistent start path yields a sentinel."""
    result = discover_repo_root(tmp_path / "nope")

    assert isinstance(result, NoRepoSentinel)
    assert "does not exist" in result.message


def test_create_context_reads_settings(tmp_path: Path) -> None:
    """Test that the production context loads [tool.vbranch] from the repo root."""
    (tmp_path / ".git").mkdir()
    (tmp_path / "pyproject.toml").write_text(
        '[tool.vbranch]\nlabel = "combine"\npush = false\n', encoding="utf-8"
    )

    ctx = create_context(dry_run=True, cwd=tmp_path)

    assert ctx.repo_root == tmp_path.resolve()
    assert ctx.settings.label == "combine"
    assert not ctx.settings.push
    assert isinstance(ctx.repository, DryRunRepository)
    assert ctx.dry_run


def test_create_context_uses_real_repository(tmp_path: Path) -> None:
    """Test that without dry-run the real gateway is used directly."""
    (tmp_path / ".git").mkdir()

    ctx = create_context(dry_run=False, cwd=tmp_path)

    assert isinstance(ctx.repository, RealRepository)


def test_with_dry_run_is_idempotent() -> None:
    """Test that wrapping an already dry-run context returns it unchanged."""
    ctx = VbranchContext.for_test(dry_run=True)

    assert ctx.with_dry_run() is ctx
    assert isinstance(VbranchContext.for_test().with_dry_run().repository, DryRunRepository)
