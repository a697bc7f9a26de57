"""Output utilities for CLI commands with clear intent.

user_output: informational messages and errors, routed to stderr
machine_output: structured results meant for stdout
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vbranch.core.types import ApplyResult, ConfigurationResult, VirtualBranchConfig


def user_output(message: str = "", nl: bool = True) -> None:
    """Output informational message for the user (stderr)."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Output structured data (stdout)."""
    click.echo(message, nl=nl)


def format_configurations_table(
    configs: list[VirtualBranchConfig], branch_names: list[str]
) -> Table:
    """Build a table listing each accepted configuration.

    Args:
        configs: Accepted configurations
        branch_names: Real branch name for each config (prefix applied), index-aligned
    """
    table = Table(title="Virtual branches", show_header=True, header_style="bold")
    table.add_column("Issue", justify="right")
    table.add_column("Branch", style="cyan")
    table.add_column("Base")
    table.add_column("Tracks")

    for config, branch in zip(configs, branch_names, strict=True):
        issue = f"#{config.issue_number}" if config.issue_number is not None else "-"
        tracks = ", ".join(config.track) if config.track else "(none)"
        table.add_row(issue, branch, config.base, tracks)
    return table


def render_diagnostics(result: ConfigurationResult) -> None:
    """Report every discarded issue with the check that failed."""
    for diagnostic in result.diagnostics:
        issue = f"#{diagnostic.issue_number}" if diagnostic.issue_number is not None else "?"
        user_output(click.style(f"⚠ Skipped issue {issue}: ", fg="yellow") + diagnostic.message)


def render_apply_result(
    result: ApplyResult, configs: list[VirtualBranchConfig], console: Console | None = None
) -> None:
    """Print a per-configuration summary table of an apply run."""
    if console is None:
        console = Console(stderr=True)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Issue", justify="right")
    table.add_column("Target", style="cyan")
    table.add_column("Status")

    applied_by_target = {applied.config.target: applied for applied in result.applied}
    for config, error in zip(configs, result.config_errors, strict=False):
        issue = f"#{config.issue_number}" if config.issue_number is not None else "-"
        if error is not None:
            status = f"[red]✗ {escape(str(error))}[/red]"
        else:
            applied = applied_by_target.get(config.target)
            if applied is not None and applied.changed:
                parts = []
                if applied.created:
                    parts.append("created")
                if applied.merged:
                    parts.append("merged " + ", ".join(applied.merged))
                status = "[green]✓ " + "; ".join(parts) + "[/green]"
            else:
                status = "[dim]✓ up to date[/dim]"
        table.add_row(issue, config.target, status)

    console.print(table)

    if result.pipeline_error is not None:
        console.print(f"[red bold]Error:[/red bold] {escape(str(result.pipeline_error))}")
