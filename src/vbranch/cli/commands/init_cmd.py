"""Write vbranch settings into the repository's pyproject.toml."""

import click

from vbranch.cli.core import apply_setting_overrides, require_repo_root
from vbranch.cli.output import user_output
from vbranch.core.context import VbranchContext
from vbranch.core.settings import write_settings_to_pyproject


@click.command("init")
@click.option("--label", type=str, default=None, help="Issue label marking configurations.")
@click.option("--prefix", type=str, default=None, help="Namespace for virtual branch names.")
@click.option("--remote", type=str, default=None, help="Git remote to fetch from and push to.")
@click.option("--push/--no-push", default=None, help="Push reconciled branches.")
@click.pass_obj
def init_cmd(
    ctx: VbranchContext,
    label: str | None,
    prefix: str | None,
    remote: str | None,
    push: bool | None,
) -> None:
    """Create or update [tool.vbranch] in pyproject.toml."""
    repo_root = require_repo_root(ctx)
    ctx = apply_setting_overrides(ctx, label=label, prefix=prefix, remote=remote, push=push)

    path = write_settings_to_pyproject(repo_root, ctx.settings)
    user_output(click.style("✓ ", fg="green") + f"Wrote [tool.vbranch] to {path}")
