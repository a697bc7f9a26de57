"""Integration tests driving RealRepository against real git repositories."""

import shutil
import subprocess
from pathlib import Path

import pytest

from vbranch.core.applier import ConfigurationApplier
from vbranch.core.errors import MergeConflictError
from vbranch.core.git.real import RealRepository
from vbranch.core.settings import VirtualBranchSettings
from vbranch.core.types import VirtualBranchConfig

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)
    return result.stdout.strip()


def _configure_identity(repo: Path) -> None:
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")


def _commit_file(repo: Path, name: str, content: str, message: str) -> None:
    (repo / name).write_text(content, encoding="utf-8")
    _git(repo, "add", name)
    _git(repo, "commit", "--quiet", "-m", message)


@pytest.fixture
def checkout(tmp_path: Path) -> Path:
    """Clone of a bare origin holding main plus branches a, b, c and d.

    a and b add separate files; c and d edit README.md differently.
    """
    origin = tmp_path / "origin.git"
    _git(tmp_path, "init", "--quiet", "--bare", "-b", "main", str(origin))

    seed = tmp_path / "seed"
    seed.mkdir()
    _git(seed, "init", "--quiet", "-b", "main")
    _configure_identity(seed)
    _commit_file(seed, "README.md", "base\n", "Initial commit")
    for branch, name, content in [
        ("a", "a.txt", "a\n"),
        ("b", "b.txt", "b\n"),
        ("c", "README.md", "from c\n"),
        ("d", "README.md", "from d\n"),
    ]:
        _git(seed, "checkout", "--quiet", "-b", branch, "main")
        _commit_file(seed, name, content, f"Change on {branch}")
    _git(seed, "checkout", "--quiet", "main")
    _git(seed, "remote", "add", "origin", str(origin))
    _git(seed, "push", "--quiet", "origin", "main", "a", "b", "c", "d")

    clone = tmp_path / "clone"
    _git(tmp_path, "clone", "--quiet", str(origin), str(clone))
    _configure_identity(clone)
    return clone


def test_list_branch_names(checkout: Path) -> None:
    """Test that remote branches are listed without the refs/heads/ prefix."""
    assert RealRepository().list_branch_names(checkout, "origin") == {"main", "a", "b", "c", "d"}


def test_apply_creates_merges_and_pushes(checkout: Path) -> None:
    """Test a full apply run followed by an idempotent re-run."""
    repository = RealRepository()
    applier = ConfigurationApplier(repository, VirtualBranchSettings(), checkout)
    config = VirtualBranchConfig(target="x", base="main", track=("a", "b"))

    first = applier.apply_configurations([config])

    assert first.succeeded, first.config_errors
    assert first.applied[0].created
    assert first.applied[0].merged == ("origin/a", "origin/b")
    assert "x" in repository.list_branch_names(checkout, "origin")
    files = _git(checkout, "ls-tree", "--name-only", "x").splitlines()
    assert sorted(files) == ["README.md", "a.txt", "b.txt"]
    assert repository.get_current_branch(checkout) == "main"

    head_before = _git(checkout, "rev-parse", "x")
    second = applier.apply_configurations([config])

    assert second.succeeded, second.config_errors
    assert not second.applied[0].changed
    assert _git(checkout, "rev-parse", "x") == head_before


def test_conflict_is_aborted_and_reported(checkout: Path) -> None:
    """Test that a conflicting merge fails only its config and leaves a clean tree."""
    applier = ConfigurationApplier(
        RealRepository(), VirtualBranchSettings(push=False), checkout
    )
    configs = [
        VirtualBranchConfig(target="cd", base="main", track=("c", "d")),
        VirtualBranchConfig(target="ab", base="main", track=("a", "b")),
    ]

    result = applier.apply_configurations(configs)

    assert isinstance(result.config_errors[0], MergeConflictError)
    assert result.config_errors[0].source == "origin/d"
    assert result.config_errors[1] is None
    assert result.pipeline_error is None
    assert _git(checkout, "status", "--porcelain") == ""


def test_fetch_missing_branch_raises(checkout: Path) -> None:
    """Test that fetching an unknown branch raises RuntimeError with context."""
    with pytest.raises(RuntimeError, match="Failed to fetch"):
        RealRepository().fetch_remote_ref(
            checkout, "origin", "+refs/heads/nope:refs/remotes/origin/nope"
        )


def test_option_like_target_fails_only_its_config(checkout: Path) -> None:
    """Test that a target starting with '-' is never read as a git option."""
    (checkout / "README.md").write_text("uncommitted edit\n", encoding="utf-8")
    main_before = _git(checkout, "rev-parse", "main")
    applier = ConfigurationApplier(
        RealRepository(), VirtualBranchSettings(push=False), checkout
    )
    configs = [
        VirtualBranchConfig(target="-f", base="main", track=("a",)),
        VirtualBranchConfig(target="ok", base="main", track=("b",)),
    ]

    result = applier.apply_configurations(configs)

    assert isinstance(result.config_errors[0], RuntimeError)
    assert result.config_errors[1] is None
    assert result.pipeline_error is None
    assert _git(checkout, "rev-parse", "main") == main_before
    assert (checkout / "README.md").read_text(encoding="utf-8") == "uncommitted edit\n"
    local_branches = _git(checkout, "for-each-ref", "--format=%(refname)", "refs/heads/")
    assert sorted(local_branches.splitlines()) == ["refs/heads/main", "refs/heads/ok"]
