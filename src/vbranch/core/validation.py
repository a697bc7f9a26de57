"""Checks a parsed configuration against naming rules and known branches."""

import re

from vbranch.core.errors import BranchNotFoundError, InvalidTargetNameError, TargetIsSourceError
from vbranch.core.types import BranchSet, VirtualBranchConfig

# No "/" allowed: targets live directly under the optional prefix namespace.
_BRANCH_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")


def validate_target_name(name: str) -> bool:
    """Return True if name uses only a-z, A-Z, 0-9, _ and - (and is non-empty)."""
    return _BRANCH_NAME_PATTERN.fullmatch(name) is not None


def validate_prefix(prefix: str) -> bool:
    """Return True if prefix is usable as a virtual branch namespace."""
    return _BRANCH_NAME_PATTERN.fullmatch(prefix) is not None


def validate_branches_exist(branches: BranchSet, *names: str) -> None:
    """Raise BranchNotFoundError for the first name missing from branches."""
    for name in names:
        if name not in branches:
            raise BranchNotFoundError(name)


def validate_configuration(config: VirtualBranchConfig, branches: BranchSet) -> None:
    """Validate config against the branches that exist right now.

    Checks run in order: base exists, each tracked branch exists (in track
    order), target name is well formed.

    Raises:
        BranchNotFoundError: base or a tracked branch does not exist
        InvalidTargetNameError: target contains disallowed characters
    """
    validate_branches_exist(branches, config.base, *config.track)

    if not validate_target_name(config.target):
        raise InvalidTargetNameError(config.target)


def validate_target_distinct(branch: str, config: VirtualBranchConfig) -> None:
    """Reject a target branch that is also the base or a tracked branch.

    branch is the real branch name (prefix applied) the target maps to.

    Raises:
        TargetIsSourceError: branch equals config.base or an entry of config.track
    """
    if branch == config.base or branch in config.track:
        raise TargetIsSourceError(branch)
