"""Tests for GitHubProvider end-to-end over fakes."""

from tests.test_utils.builders import config_body, make_issue
from tests.test_utils.paths import sentinel_path
from vbranch.core.git.fake import FakeRepository
from vbranch.core.github.issues.fake import FakeGitHubIssues
from vbranch.core.provider import GitHubProvider, VirtualBranchProvider
from vbranch.core.settings import VirtualBranchSettings


def test_provider_round_trip() -> None:
    """Test that configurations read from issues are applied to the repository."""
    issues = FakeGitHubIssues(
        issues={
            1: make_issue(1, config_body("x", "main", ["a", "b"])),
            2: make_issue(2, config_body("y", "main", ["gone"])),
        }
    )
    repository = FakeRepository(remote_branches={"main", "a", "b"})
    provider: VirtualBranchProvider = GitHubProvider(
        issues, repository, VirtualBranchSettings(), sentinel_path()
    )

    configurations = provider.get_configurations()
    result = provider.apply_configurations(configurations.configs)

    assert [d.issue_number for d in configurations.diagnostics] == [2]
    assert result.succeeded
    assert repository.merges == [("x", "origin/a"), ("x", "origin/b")]
    assert "x" in repository.remote_branches
