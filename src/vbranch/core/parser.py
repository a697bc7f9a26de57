"""Extract a VirtualBranchConfig from an issue body.

Issue bodies hold a small TOML block:

    Target = "feature-combined"
    Base = "main"
    Track = ["feature-a", "feature-b"]

Authors often wrap the block in markdown code formatting (`...`, ```...```
or ```toml ... ```). Only a delimiter pair wrapping the whole body is
removed; field values are never trimmed.
"""

import logging
import re
import tomllib
from typing import Any

from vbranch.core.errors import ConfigParseError, MissingFieldError
from vbranch.core.types import VirtualBranchConfig

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("Target", "Base", "Track")

_FENCED_BLOCK = re.compile(
    r"\A(?P<fence>`{3,})(?!`)"
    r"(?:[ \t]*(?P<lang>[A-Za-z0-9_+.-]+)?[ \t]*\r?\n)?"
    r"(?P<content>.*?)"
    r"(?:\r?\n[ \t]*)?"
    r"(?P=fence)`*\Z",
    re.DOTALL,
)

_INLINE_CODE = re.compile(
    r"\A(?P<ticks>`{1,2})(?!`)"
    r"(?:(?P<lang>[A-Za-z0-9_+.-]+)[ \t]*\r?\n)?"
    r"(?P<content>.*?)(?<!`)"
    r"(?P=ticks)\Z",
    re.DOTALL,
)


def strip_code_fence(body: str) -> str:
    """Remove a markdown code wrapper around the entire body, if present.

    Recognized wrappers:
    - inline code: `...` or ``...``
    - fenced block: ```...``` with an optional language tag after the opening fence
    - the closing fence may be longer than the opening one, never shorter

    Anything else is returned unchanged (apart from surrounding whitespace).
    """
    text = body.strip()

    match = _FENCED_BLOCK.match(text)
    if match is None:
        match = _INLINE_CODE.match(text)
    if match is None:
        return text

    if match.group("lang"):
        logger.debug("Stripped code wrapper with language tag %r", match.group("lang"))
    return match.group("content")


def _require_string(data: dict[str, Any], key: str, issue_number: int | None) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ConfigParseError(
            issue_number, f"{key} must be a string, got {type(value).__name__}"
        )
    return value


def _require_string_list(
    data: dict[str, Any], key: str, issue_number: int | None
) -> tuple[str, ...]:
    value = data[key]
    if not isinstance(value, list):
        raise ConfigParseError(
            issue_number, f"{key} must be a list of strings, got {type(value).__name__}"
        )
    for item in value:
        if not isinstance(item, str):
            raise ConfigParseError(
                issue_number,
                f"{key} must be a list of strings, found {type(item).__name__} entry",
            )
    return tuple(value)


def parse_issue_body(body: str | None, *, issue_number: int | None = None) -> VirtualBranchConfig:
    """Parse an issue body into a VirtualBranchConfig.

    Args:
        body: Raw issue body (None is treated as empty)
        issue_number: Source issue, used in error messages

    Returns:
        VirtualBranchConfig with values taken verbatim from the TOML block

    Raises:
        MissingFieldError: Target, Base or Track is absent (first missing one is named)
        ConfigParseError: Body is not valid TOML or a field has the wrong type
    """
    text = strip_code_fence(body or "")

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(issue_number, f"malformed TOML: {e}") from e

    for key in REQUIRED_FIELDS:
        if key not in data:
            raise MissingFieldError(issue_number, key)

    unknown = sorted(set(data) - set(REQUIRED_FIELDS))
    if unknown:
        logger.debug("Ignoring unknown keys in issue #%s: %s", issue_number, unknown)

    return VirtualBranchConfig(
        target=_require_string(data, "Target", issue_number),
        base=_require_string(data, "Base", issue_number),
        track=_require_string_list(data, "Track", issue_number),
        issue_number=issue_number,
    )
