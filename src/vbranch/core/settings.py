"""Run settings loaded from pyproject.toml [tool.vbranch].

Example:

    [tool.vbranch]
    label = "virtual-branch"
    remote = "origin"
    prefix = "virtual"
    push = true
"""

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

import tomlkit

from vbranch.core.validation import validate_prefix

DEFAULT_LABEL = "virtual-branch"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class VirtualBranchSettings:
    """Immutable settings for one run.

    Attributes:
        label: Issue label marking configuration issues
        remote: Git remote to fetch from and push to
        prefix: Optional namespace; target "x" becomes branch "<prefix>/x"
        push: Push reconciled target branches to the remote
        owner: GitHub owner (None lets gh resolve it from the checkout)
        repository: GitHub repository name (None lets gh resolve it)
    """

    label: str = DEFAULT_LABEL
    remote: str = DEFAULT_REMOTE
    prefix: str | None = None
    push: bool = True
    owner: str | None = None
    repository: str | None = None

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("label must not be empty")
        if not self.remote:
            raise ValueError("remote must not be empty")
        if self.prefix is not None and not validate_prefix(self.prefix):
            raise ValueError(
                f"Invalid prefix '{self.prefix}': "
                "allowed characters are a-z, A-Z, 0-9, _, -"
            )
        if (self.owner is None) != (self.repository is None):
            raise ValueError("owner and repository must be configured together")

    def branch_name(self, target: str) -> str:
        """Real branch name for a configuration target."""
        if self.prefix is None:
            return target
        return f"{self.prefix}/{target}"

    def with_overrides(
        self,
        *,
        label: str | None = None,
        remote: str | None = None,
        prefix: str | None = None,
        push: bool | None = None,
    ) -> "VirtualBranchSettings":
        """Return a copy with every non-None override applied."""
        changes: dict[str, object] = {}
        if label is not None:
            changes["label"] = label
        if remote is not None:
            changes["remote"] = remote
        if prefix is not None:
            changes["prefix"] = prefix
        if push is not None:
            changes["push"] = push
        return replace(self, **changes)


def load_settings(repo_root: Path) -> VirtualBranchSettings:
    """Load settings from repo_root/pyproject.toml, falling back to defaults.

    Raises:
        ValueError: If [tool.vbranch] holds invalid values
    """
    pyproject_path = repo_root / "pyproject.toml"
    if not pyproject_path.exists():
        return VirtualBranchSettings()

    data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    section = data.get("tool", {}).get("vbranch", {})
    if not section:
        return VirtualBranchSettings()

    prefix = section.get("prefix")
    owner = section.get("owner")
    repository = section.get("repository")
    push = section.get("push", True)
    if not isinstance(push, bool):
        raise ValueError(f"'push' in {pyproject_path} must be true or false")

    return VirtualBranchSettings(
        label=str(section.get("label", DEFAULT_LABEL)),
        remote=str(section.get("remote", DEFAULT_REMOTE)),
        prefix=str(prefix) if prefix is not None else None,
        push=push,
        owner=str(owner) if owner is not None else None,
        repository=str(repository) if repository is not None else None,
    )


def write_settings_to_pyproject(repo_root: Path, settings: VirtualBranchSettings) -> Path:
    """Create or update the [tool.vbranch] section of pyproject.toml.

    Preserves existing formatting and comments using tomlkit. Label, remote
    and push are always written; optional values only when set.

    Returns:
        Path to the written pyproject.toml
    """
    pyproject_path = repo_root / "pyproject.toml"

    if pyproject_path.exists():
        with pyproject_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        doc = tomlkit.document()

    if "tool" not in doc:
        doc["tool"] = tomlkit.table()  # type: ignore[index]

    if "vbranch" not in doc["tool"]:  # type: ignore[operator]
        doc["tool"]["vbranch"] = tomlkit.table()  # type: ignore[index]

    section = doc["tool"]["vbranch"]  # type: ignore[index]
    section["label"] = settings.label  # type: ignore[index]
    section["remote"] = settings.remote  # type: ignore[index]
    section["push"] = settings.push  # type: ignore[index]
    if settings.prefix is not None:
        section["prefix"] = settings.prefix  # type: ignore[index]
    if settings.owner is not None and settings.repository is not None:
        section["owner"] = settings.owner  # type: ignore[index]
        section["repository"] = settings.repository  # type: ignore[index]

    with pyproject_path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)

    return pyproject_path
