"""List the virtual branch configurations declared in open issues."""

import click
from rich.console import Console

from vbranch.cli.core import apply_setting_overrides, require_repo_root
from vbranch.cli.output import format_configurations_table, render_diagnostics, user_output
from vbranch.core.context import VbranchContext
from vbranch.core.errors import CollaboratorTransportError


@click.command("list")
@click.option("--label", type=str, default=None, help="Issue label to read configurations from.")
@click.option("--prefix", type=str, default=None, help="Namespace for virtual branch names.")
@click.option("--remote", type=str, default=None, help="Git remote holding the branches.")
@click.pass_obj
def list_cmd(
    ctx: VbranchContext, label: str | None, prefix: str | None, remote: str | None
) -> None:
    """Show valid configurations and why other issues were skipped.

    Nothing in the repository is changed.
    """
    repo_root = require_repo_root(ctx)
    ctx = apply_setting_overrides(ctx, label=label, prefix=prefix, remote=remote)

    try:
        result = ctx.provider(repo_root).get_configurations()
    except CollaboratorTransportError as e:
        user_output(f"Error: {e}")
        raise SystemExit(1) from None

    render_diagnostics(result)

    if not result.configs:
        user_output(f"No virtual branch configurations found (label: {ctx.settings.label}).")
        return

    branch_names = [ctx.settings.branch_name(config.target) for config in result.configs]
    Console().print(format_configurations_table(result.configs, branch_names))
