"""Apply every virtual branch configuration to the repository."""

import logging

import click

from vbranch.cli.core import apply_setting_overrides, require_repo_root
from vbranch.cli.output import render_apply_result, render_diagnostics, user_output
from vbranch.core.context import VbranchContext
from vbranch.core.errors import CollaboratorTransportError

logger = logging.getLogger(__name__)


@click.command("sync")
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show what would be done without creating, merging or pushing branches.",
)
@click.option("--label", type=str, default=None, help="Issue label to read configurations from.")
@click.option("--prefix", type=str, default=None, help="Namespace for virtual branch names.")
@click.option("--remote", type=str, default=None, help="Git remote to fetch from and push to.")
@click.option(
    "--push/--no-push",
    default=None,
    help="Push reconciled branches to the remote (default from configuration).",
)
@click.pass_obj
def sync_cmd(
    ctx: VbranchContext,
    dry_run: bool,
    label: str | None,
    prefix: str | None,
    remote: str | None,
    push: bool | None,
) -> None:
    """Create and update virtual branches declared in open issues.

    Steps:
    1. List branches on the remote
    2. Read open issues carrying the label and validate their configurations
    3. For each valid configuration: fetch, create the target from its base
       if needed, merge tracked branches in order, push

    Exits with status 1 if the run could not proceed or any configuration failed.
    """
    repo_root = require_repo_root(ctx)
    ctx = apply_setting_overrides(ctx, label=label, prefix=prefix, remote=remote, push=push)
    if dry_run:
        ctx = ctx.with_dry_run()

    provider = ctx.provider(repo_root)
    try:
        result = provider.get_configurations()
    except CollaboratorTransportError as e:
        user_output(f"Error: {e}")
        raise SystemExit(1) from None

    render_diagnostics(result)

    if not result.configs:
        user_output(f"No virtual branch configurations found (label: {ctx.settings.label}).")
        return

    logger.debug("Applying %d configurations", len(result.configs))
    apply_result = provider.apply_configurations(result.configs)
    render_apply_result(apply_result, result.configs)

    if not apply_result.succeeded:
        raise SystemExit(1)
