from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from wof_folders.cli.utils import load_plans
from wof_folders.core.progress import SourceReport

console = Console()


def stats_command(
    sources: List[Path] = typer.Argument(..., exists=True, readable=True),
    country: Optional[List[str]] = typer.Option(
        None,
        "--country",
        "-c",
        help="Only build admin repositories for this ISO-2 code (repeatable)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        help="Alternative wof_folders.yml",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show per-source build statistics.
    """
    plans, state, _ = load_plans(
        sources, countries=country, config_path=config, verbose=verbose
    )

    table = Table(title="WOF Folder Statistics")
    table.add_column("Counter", style="bold")
    for plan in plans:
        table.add_column(plan.source, justify="right")
    if len(plans) > 1:
        table.add_column("Total", justify="right", style="bold")

    totals = state.totals()
    for f in fields(SourceReport):
        row = [str(getattr(plan.report, f.name)) for plan in plans]
        if len(plans) > 1:
            row.append(str(getattr(totals, f.name)))
        table.add_row(f.name.replace("_", " ").capitalize(), *row)

    console.print(table)
