import logging
import os

import click

from vbranch.cli.commands.check_cmd import check_cmd
from vbranch.cli.commands.init_cmd import init_cmd
from vbranch.cli.commands.list_cmd import list_cmd
from vbranch.cli.commands.sync_cmd import sync_cmd
from vbranch.cli.output import user_output
from vbranch.core.context import create_context

# Enable debug logging if VBRANCH_DEBUG environment variable is set
if os.getenv("VBRANCH_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="vbranch")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Maintain virtual branches declared in GitHub issues."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=False)
        except ValueError as e:
            user_output(f"Error: Invalid [tool.vbranch] configuration: {e}")
            raise SystemExit(1) from None


cli.add_command(check_cmd)
cli.add_command(init_cmd)
cli.add_command(list_cmd)
cli.add_command(sync_cmd)


def main() -> None:
    """CLI entry point used by the `vbranch` console script."""
    cli()
