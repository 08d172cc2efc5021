"""Output utilities for CLI commands with clear intent.

user_output() is for progress and status messages meant for a human (stderr).
machine_output() is for the command's result (stdout), so the report can be
piped or redirected without progress noise.
"""

from typing import Any

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from pubcheck.core.types import RunSummary


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write command output to stdout."""
    click.echo(message, nl=nl)


def format_sweep_summary(summary: RunSummary, report_path: str) -> Panel:
    """Format final summary box with counts, success rate and report location.

    Args:
        summary: Folded sweep counts
        report_path: Where the report was written

    Returns:
        Rich Panel with formatted summary
    """
    all_passed = summary.failed_checks == 0
    lines = [
        Text(f"Checks: {summary.total_checks}"),
        Text(f"✅ Passed: {summary.passed_checks}", style="green"),
        Text(f"❌ Failed: {summary.failed_checks}", style="red" if summary.failed_checks else ""),
        Text(f"Success rate: {summary.success_rate}%", style="bold"),
        Text(""),
        Text(f"📄 {report_path}", style="blue"),
    ]
    title = "All Assets Published" if all_passed else "Missing Assets"
    return Panel(
        Text("\n").join(lines),
        title=title,
        border_style="green" if all_passed else "red",
        padding=(1, 2),
    )


def print_sweep_summary(summary: RunSummary, report_path: str) -> None:
    """Print the summary panel to stderr."""
    Console(stderr=True).print(format_sweep_summary(summary, report_path))
