"""Tests for FakeRepository test infrastructure.

These tests verify that FakeRepository simulates git behavior closely enough
for the applier tests to be meaningful.
"""

import pytest

from tests.test_utils.paths import sentinel_path
from vbranch.core.errors import MergeConflictError
from vbranch.core.git.abc import remote_refspec
from vbranch.core.git.fake import FakeRepository


def test_fake_repository_lists_remote_branches() -> None:
    """Test that list_branch_names returns the configured remote branches."""
    repository = FakeRepository(remote_branches={"main", "a"})

    assert repository.list_branch_names(sentinel_path(), "origin") == {"main", "a"}


def test_fake_repository_fetch_unknown_branch_fails() -> None:
    """Test that fetching a branch missing on the remote raises RuntimeError."""
    repository = FakeRepository(remote_branches={"main"})

    with pytest.raises(RuntimeError, match="couldn't find remote ref"):
        repository.fetch_remote_ref(sentinel_path(), "origin", remote_refspec("origin", "nope"))


def test_fake_repository_ensure_branch_requires_fetched_start_point() -> None:
    """Test that branches can only start from fetched or local refs."""
    repository = FakeRepository(remote_branches={"main"})

    with pytest.raises(RuntimeError, match="not a valid ref"):
        repository.ensure_branch(sentinel_path(), "x", "origin/main")

    repository.fetch_remote_ref(sentinel_path(), "origin", remote_refspec("origin", "main"))
    assert repository.ensure_branch(sentinel_path(), "x", "origin/main") is True
    assert repository.ensure_branch(sentinel_path(), "x", "origin/main") is False
    assert repository.local_branches == {"main", "x"}


def test_fake_repository_merge_reports_new_commit_once() -> None:
    """Test that merging the same pair twice only produces one commit."""
    repository = FakeRepository(remote_branches={"main", "a"}, local_branches={"main", "x"})
    repository.fetch_remote_ref(sentinel_path(), "origin", remote_refspec("origin", "a"))

    assert repository.merge_into(sentinel_path(), "x", "origin/a") is True
    assert repository.merge_into(sentinel_path(), "x", "origin/a") is False
    assert repository.merges == [("x", "origin/a")]
    assert repository.get_current_branch(sentinel_path()) == "x"


def test_fake_repository_configured_conflict() -> None:
    """Test that configured conflicts raise MergeConflictError."""
    repository = FakeRepository(
        remote_branches={"a"}, local_branches={"x"}, conflicts={("x", "origin/a")}
    )
    repository.fetch_remote_ref(sentinel_path(), "origin", remote_refspec("origin", "a"))

    with pytest.raises(MergeConflictError) as exc_info:
        repository.merge_into(sentinel_path(), "x", "origin/a")

    assert exc_info.value.target == "x"
    assert exc_info.value.source == "origin/a"


def test_fake_repository_push_publishes_branch() -> None:
    """Test that a pushed branch becomes visible on the remote."""
    repository = FakeRepository(local_branches={"main", "x"})

    repository.push_branch(sentinel_path(), "origin", "x")

    assert "x" in repository.list_branch_names(sentinel_path(), "origin")
    assert repository.pushed_branches == [("origin", "x")]
