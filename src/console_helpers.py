"""Rich console output for the command line entrypoint.

Exposes ``rprint`` for styled messages and ``build_summary_table`` for the
table printed after a build. Pipeline modules log through ``logging`` and do
not import Rich themselves.

Examples
--------
>>> from src.console_helpers import rprint
>>> rprint("[green]Done[/green]")
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table

_CONSOLE = Console()


def rprint(*objects: Any, **kwargs: Any) -> None:
    """Print through the shared Rich console."""
    _CONSOLE.print(*objects, **kwargs)


def build_summary_table(report: Any) -> Table:
    """Return a two-column table summarising a ``BuildReport``.

    Parameters
    ----------
    report : BuildReport
        Result of ``src.pipeline.site_builder.runner.build_site``.

    Returns
    -------
    rich.table.Table
        One row per reported figure.
    """
    table = Table(title="Site build", show_header=True, header_style="bold blue")
    table.add_column("Item", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("States", str(report.states))
    table.add_row("Cities", str(report.cities))
    table.add_row("Stores", str(report.stores))
    table.add_row("Pages", str(report.pages))
    table.add_row("Artifacts", ", ".join(report.artifacts))
    if report.slug_collisions:
        table.add_row("Slug collisions", f"[yellow]{report.slug_collisions}[/yellow]")
    if report.stores_with_bad_hours:
        table.add_row(
            "Stores with unreadable hours",
            f"[yellow]{report.stores_with_bad_hours}[/yellow]",
        )
    table.add_row("Output", str(report.output_dir))
    return table


__all__ = ["build_summary_table", "rprint"]
