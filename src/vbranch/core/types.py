"""Data types shared by the configuration pipeline."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from vbranch.core.errors import VirtualBranchError


@dataclass(frozen=True)
class VirtualBranchConfig:
    """Configuration declared by one issue.

    Attributes:
        target: Branch to create and maintain
        base: Existing branch the target forks from
        track: Existing branches merged into the target, in merge order
        issue_number: Source issue (None when parsed outside an issue)
    """

    target: str
    base: str
    track: tuple[str, ...]
    issue_number: int | None = field(default=None, compare=False)


class BranchSet:
    """Read-only lookup of branch names known to exist during a run."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = frozenset(names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"BranchSet({sorted(self._names)!r})"


@dataclass(frozen=True)
class Diagnostic:
    """Reason one issue's configuration was discarded."""

    issue_number: int | None
    issue_url: str | None
    error: VirtualBranchError

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class ConfigurationResult:
    """Accepted configurations plus diagnostics for the discarded ones."""

    configs: list[VirtualBranchConfig]
    diagnostics: list[Diagnostic]


@dataclass(frozen=True)
class AppliedBranch:
    """Outcome of applying one configuration successfully.

    Attributes:
        config: The configuration that was applied
        branch: Real branch name (prefix included)
        created: True if the branch did not exist before this run
        merged: Tracked sources that produced a new commit
    """

    config: VirtualBranchConfig
    branch: str
    created: bool
    merged: tuple[str, ...]

    @property
    def changed(self) -> bool:
        return self.created or bool(self.merged)


@dataclass(frozen=True)
class ApplyResult:
    """Result of applying a batch of configurations.

    Two separate channels:
    - config_errors: one slot per input config (None on success). Empty if the
      run failed before any config was attempted.
    - pipeline_error: failure outside the per-config loop.
    """

    config_errors: list[Exception | None]
    pipeline_error: Exception | None
    applied: list[AppliedBranch] = field(default_factory=list)

    @property
    def failed(self) -> list[tuple[int, Exception]]:
        return [(i, err) for i, err in enumerate(self.config_errors) if err is not None]

    @property
    def succeeded(self) -> bool:
        return self.pipeline_error is None and not self.failed
