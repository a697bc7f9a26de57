"""Error kinds raised while extracting, validating and applying configurations.

Parse and validation errors are per-issue and end up as diagnostics.
CollaboratorTransportError aborts a whole run. MergeConflictError is
reported for the single configuration that hit it.
"""


class VirtualBranchError(Exception):
    """Base class for all vbranch errors."""


class ConfigParseError(VirtualBranchError):
    """Issue body could not be turned into a configuration."""

    def __init__(self, issue_number: int | None, reason: str) -> None:
        self.issue_number = issue_number
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        if self.issue_number is None:
            return f"Invalid configuration: {self.reason}"
        return f"Invalid configuration in issue #{self.issue_number}: {self.reason}"


class MissingFieldError(ConfigParseError):
    """A required field is absent from the configuration block."""

    def __init__(self, issue_number: int | None, field: str) -> None:
        self.field = field
        super().__init__(issue_number, f"{field} was not defined in configuration")


class ConfigValidationError(VirtualBranchError):
    """Configuration parsed but does not fit the repository."""


class BranchNotFoundError(ConfigValidationError):
    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__(f"Branch does not exist: {branch_name}")


class InvalidTargetNameError(ConfigValidationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Target branch name '{name}' did not match the allowed characters of: "
            "a-z, A-Z, 0-9, _, -"
        )


class TargetIsSourceError(ConfigValidationError):
    """Target branch is also the base or one of the tracked branches."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(
            f"Target branch '{branch}' must differ from the base and tracked branches"
        )


class DuplicateTargetError(ConfigValidationError):
    """Another issue already claimed the same target branch."""

    def __init__(self, target: str, first_issue_number: int | None) -> None:
        self.target = target
        self.first_issue_number = first_issue_number
        owner = f"issue #{first_issue_number}" if first_issue_number is not None else "another issue"
        super().__init__(f"Target branch '{target}' is already declared by {owner}")


class CollaboratorTransportError(VirtualBranchError):
    """Issue tracker or repository could not be reached; the run cannot proceed."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to {operation}: {cause}")


class MergeConflictError(VirtualBranchError):
    def __init__(self, target: str, source: str) -> None:
        self.target = target
        self.source = source
        super().__init__(f"Merge conflict merging '{source}' into '{target}'")
