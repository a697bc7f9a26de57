"""Data types for the GitHub issues integration."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IssueInfo:
    """Information about a GitHub issue."""

    number: int
    title: str
    body: str
    url: str
    labels: list[str] = field(default_factory=list)
    state: str = "OPEN"  # "OPEN" or "CLOSED"


@dataclass(frozen=True)
class IssuePage:
    """One page of issue listing results.

    Attributes:
        issues: Issues on this page
        next_page: Page number to request next, or None when this was the last page
    """

    issues: list[IssueInfo]
    next_page: int | None
