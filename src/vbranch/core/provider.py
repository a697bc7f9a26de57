"""Provider capability: where configurations come from and where they are applied."""

from abc import ABC, abstractmethod
from pathlib import Path

from vbranch.core.applier import ConfigurationApplier
from vbranch.core.git.abc import Repository
from vbranch.core.github.issues.abc import GitHubIssues
from vbranch.core.settings import VirtualBranchSettings
from vbranch.core.source import ConfigurationSource
from vbranch.core.types import ApplyResult, ConfigurationResult, VirtualBranchConfig


class VirtualBranchProvider(ABC):
    """Capabilities any backend must offer to drive virtual branches."""

    @abstractmethod
    def get_configurations(self) -> ConfigurationResult:
        """Collect valid configurations plus diagnostics for discarded ones.

        Raises:
            CollaboratorTransportError: If the backend cannot be reached
        """
        ...

    @abstractmethod
    def apply_configurations(self, configs: list[VirtualBranchConfig]) -> ApplyResult:
        """Apply configurations returned by get_configurations.

        Per-configuration failures are reported in ApplyResult.config_errors;
        a failure outside the per-configuration loop in ApplyResult.pipeline_error.
        """
        ...


class GitHubProvider(VirtualBranchProvider):
    """Configurations from GitHub issues, applied to a local git checkout."""

    def __init__(
        self,
        issues: GitHubIssues,
        repository: Repository,
        settings: VirtualBranchSettings,
        repo_root: Path,
    ) -> None:
        self._source = ConfigurationSource(issues, repository, settings, repo_root)
        self._applier = ConfigurationApplier(repository, settings, repo_root)

    def get_configurations(self) -> ConfigurationResult:
        return self._source.get_configurations()

    def apply_configurations(self, configs: list[VirtualBranchConfig]) -> ApplyResult:
        return self._applier.apply_configurations(configs)
