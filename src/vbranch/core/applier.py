"""Reconcile accepted configurations against the repository."""

import logging
from pathlib import Path

from vbranch.core.errors import VirtualBranchError
from vbranch.core.git.abc import Repository, remote_refspec
from vbranch.core.settings import VirtualBranchSettings
from vbranch.core.types import AppliedBranch, ApplyResult, VirtualBranchConfig

logger = logging.getLogger(__name__)


class ConfigurationApplier:
    """Applies each configuration independently.

    A failure applying one configuration is recorded at its index and the
    remaining configurations are still attempted. Failures outside the
    per-configuration loop go to ApplyResult.pipeline_error.
    """

    def __init__(
        self,
        repository: Repository,
        settings: VirtualBranchSettings,
        repo_root: Path,
    ) -> None:
        self._repository = repository
        self._settings = settings
        self._repo_root = repo_root

    def apply_configurations(self, configs: list[VirtualBranchConfig]) -> ApplyResult:
        """Fetch tracked branches and merge them into each target branch.

        Returns:
            ApplyResult with one config_errors slot per config and a separate
            pipeline_error (both may be set)
        """
        remote = self._settings.remote
        try:
            remote_branches = self._repository.list_branch_names(self._repo_root, remote)
        except RuntimeError as e:
            logger.debug("Could not list remote branches: %s", e)
            return ApplyResult(config_errors=[], pipeline_error=e)

        original_branch = self._repository.get_current_branch(self._repo_root)
        logger.debug("Applying %d configurations from %s", len(configs), original_branch)

        config_errors: list[Exception | None] = []
        applied: list[AppliedBranch] = []
        for config in configs:
            try:
                applied.append(self._apply_configuration(config, remote_branches))
            except (VirtualBranchError, RuntimeError, OSError) as e:
                logger.warning("Failed to apply configuration for %s: %s", config.target, e)
                logger.debug("Exception details:", exc_info=True)
                config_errors.append(e)
            else:
                config_errors.append(None)

        pipeline_error: Exception | None = None
        if original_branch is not None:
            try:
                self._repository.checkout_branch(self._repo_root, original_branch)
            except RuntimeError as e:
                logger.warning("Could not return to %s: %s", original_branch, e)
                pipeline_error = e

        return ApplyResult(
            config_errors=config_errors, pipeline_error=pipeline_error, applied=applied
        )

    def _apply_configuration(
        self, config: VirtualBranchConfig, remote_branches: set[str]
    ) -> AppliedBranch:
        remote = self._settings.remote
        branch = self._settings.branch_name(config.target)
        target_on_remote = branch in remote_branches

        to_fetch = [config.base]
        if target_on_remote:
            to_fetch.append(branch)
        to_fetch.extend(config.track)
        for name in dict.fromkeys(to_fetch):
            self._repository.fetch_remote_ref(self._repo_root, remote, remote_refspec(remote, name))

        start_point = f"{remote}/{branch}" if target_on_remote else f"{remote}/{config.base}"
        created = self._repository.ensure_branch(self._repo_root, branch, start_point)
        logger.debug("Branch %s %s from %s", branch, "created" if created else "exists", start_point)

        sources: list[str] = []
        if target_on_remote and not created:
            # Local branch may lag behind the remote one
            sources.append(f"{remote}/{branch}")
        sources.extend(f"{remote}/{track}" for track in config.track)

        merged: list[str] = []
        for source in sources:
            if self._repository.merge_into(self._repo_root, branch, source):
                merged.append(source)

        if self._settings.push:
            self._repository.push_branch(self._repo_root, remote, branch)

        return AppliedBranch(config=config, branch=branch, created=created, merged=tuple(merged))
