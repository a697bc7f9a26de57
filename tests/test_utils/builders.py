"""Builders for issue fixtures."""

from vbranch.core.github.issues.types import IssueInfo

LABEL = "virtual-branch"


def config_body(target: str, base: str, track: list[str]) -> str:
    """Render a configuration block the way a maintainer would type it."""
    tracks = ", ".join(f'"{t}"' for t in track)
    return f'Target = "{target}"\nBase = "{base}"\nTrack = [{tracks}]\n'


def make_issue(
    number: int, body: str, *, labels: list[str] | None = None, state: str = "OPEN"
) -> IssueInfo:
    return IssueInfo(
        number=number,
        title=f"Virtual branch {number}",
        body=body,
        url=f"https://github.com/test-owner/test-repo/issues/{number}",
        labels=labels if labels is not None else [LABEL],
        state=state,
    )
