"""Collect virtual branch configurations from labeled GitHub issues."""

import logging
from pathlib import Path

from vbranch.core.errors import (
    CollaboratorTransportError,
    DuplicateTargetError,
    VirtualBranchError,
)
from vbranch.core.git.abc import Repository
from vbranch.core.github.issues.abc import GitHubIssues
from vbranch.core.github.issues.types import IssueInfo
from vbranch.core.parser import parse_issue_body
from vbranch.core.settings import VirtualBranchSettings
from vbranch.core.types import BranchSet, ConfigurationResult, Diagnostic, VirtualBranchConfig
from vbranch.core.validation import validate_configuration, validate_target_distinct

logger = logging.getLogger(__name__)


class ConfigurationSource:
    """Turns open labeled issues into validated configurations.

    One bad issue never blocks the rest: parse and validation failures are
    collected as diagnostics. Failing to reach the repository or the issue
    tracker aborts the whole call.
    """

    def __init__(
        self,
        issues: GitHubIssues,
        repository: Repository,
        settings: VirtualBranchSettings,
        repo_root: Path,
    ) -> None:
        self._issues = issues
        self._repository = repository
        self._settings = settings
        self._repo_root = repo_root

    def load_branch_set(self) -> BranchSet:
        """Read the branch names that exist on the remote.

        Raises:
            CollaboratorTransportError: If the branches cannot be listed
        """
        try:
            names = self._repository.list_branch_names(self._repo_root, self._settings.remote)
        except RuntimeError as e:
            raise CollaboratorTransportError("list repository branches", e) from e
        logger.debug("Loaded %d branches from remote %s", len(names), self._settings.remote)
        return BranchSet(names)

    def _fetch_issues(self) -> list[IssueInfo]:
        try:
            return list(self._issues.iter_open_issues(self._repo_root, self._settings.label))
        except RuntimeError as e:
            raise CollaboratorTransportError(
                f"list open issues labeled '{self._settings.label}'", e
            ) from e

    def get_configurations(self) -> ConfigurationResult:
        """Fetch, parse and validate every open labeled issue.

        Returns:
            ConfigurationResult with accepted configs (in issue order) and one
            diagnostic per discarded issue

        Raises:
            CollaboratorTransportError: If branches or issues cannot be retrieved
        """
        branches = self.load_branch_set()
        issues = self._fetch_issues()
        logger.debug("Processing %d issues labeled %r", len(issues), self._settings.label)

        configs: list[VirtualBranchConfig] = []
        diagnostics: list[Diagnostic] = []
        claimed_targets: dict[str, int | None] = {}

        for issue in issues:
            try:
                config = parse_issue_body(issue.body, issue_number=issue.number)
                validate_configuration(config, branches)
                validate_target_distinct(self._settings.branch_name(config.target), config)
                if config.target in claimed_targets:
                    raise DuplicateTargetError(config.target, claimed_targets[config.target])
            except VirtualBranchError as e:
                logger.warning("Discarding issue #%d: %s", issue.number, e)
                diagnostics.append(
                    Diagnostic(issue_number=issue.number, issue_url=issue.url, error=e)
                )
                continue

            claimed_targets[config.target] = config.issue_number
            configs.append(config)
            logger.debug("Accepted configuration from issue #%d: %s", issue.number, config)

        return ConfigurationResult(configs=configs, diagnostics=diagnostics)
