"""Validate a single configuration body before opening an issue."""

from typing import TextIO

import click

from vbranch.cli.core import apply_setting_overrides, require_repo_root
from vbranch.cli.output import user_output
from vbranch.core.context import VbranchContext
from vbranch.core.errors import CollaboratorTransportError, VirtualBranchError
from vbranch.core.parser import parse_issue_body
from vbranch.core.source import ConfigurationSource
from vbranch.core.validation import validate_configuration, validate_target_distinct


@click.command("check")
@click.argument("body_file", type=click.File("r", encoding="utf-8"))
@click.option("--remote", type=str, default=None, help="Git remote holding the branches.")
@click.pass_obj
def check_cmd(ctx: VbranchContext, body_file: TextIO, remote: str | None) -> None:
    """Check an issue body read from BODY_FILE ('-' for stdin).

    Parses the configuration block and validates it against the branches
    currently on the remote.
    """
    repo_root = require_repo_root(ctx)
    ctx = apply_setting_overrides(ctx, remote=remote)

    try:
        config = parse_issue_body(body_file.read())
    except VirtualBranchError as e:
        user_output(click.style("✗ ", fg="red") + str(e))
        raise SystemExit(1) from None

    source = ConfigurationSource(ctx.issues, ctx.repository, ctx.settings, repo_root)
    try:
        branches = source.load_branch_set()
    except CollaboratorTransportError as e:
        user_output(f"Error: {e}")
        raise SystemExit(1) from None

    try:
        validate_configuration(config, branches)
        validate_target_distinct(ctx.settings.branch_name(config.target), config)
    except VirtualBranchError as e:
        user_output(click.style("✗ ", fg="red") + str(e))
        raise SystemExit(1) from None

    tracks = ", ".join(config.track) if config.track else "(none)"
    user_output(
        click.style("✓ ", fg="green")
        + f"{ctx.settings.branch_name(config.target)} from {config.base}, tracking {tracks}"
    )
