"""Shared helpers for CLI commands."""

from pathlib import Path

from vbranch.cli.output import user_output
from vbranch.core.context import NoRepoSentinel, VbranchContext


def require_repo_root(ctx: VbranchContext) -> Path:
    """Return the repository root or exit with an error outside a repository."""
    if isinstance(ctx.repo_root, NoRepoSentinel):
        user_output(f"Error: {ctx.repo_root.message}")
        raise SystemExit(1)
    return ctx.repo_root


def apply_setting_overrides(
    ctx: VbranchContext,
    *,
    label: str | None = None,
    remote: str | None = None,
    prefix: str | None = None,
    push: bool | None = None,
) -> VbranchContext:
    """Return ctx with CLI option overrides applied to its settings.

    Exits with an error if an override is invalid.
    """
    try:
        settings = ctx.settings.with_overrides(
            label=label, remote=remote, prefix=prefix, push=push
        )
    except ValueError as e:
        user_output(f"Error: {e}")
        raise SystemExit(1) from None
    return ctx.with_settings(settings)
