from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from wof_folders.cli.utils import load_plans
from wof_folders.exporter import (
    SeedLayout,
    export_plans_json,
    serialize_plans_to_json_string,
)

console = Console()


def plan_command(
    sources: List[Path] = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    country: Optional[List[str]] = typer.Option(
        None,
        "--country",
        "-c",
        help="Only build admin repositories for this ISO-2 code (repeatable)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Build this many sources in parallel",
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
    Export the folder plan (folders, leaves, seed files) as JSON.
    """
    plans, state, cfg = load_plans(
        sources,
        countries=country,
        workers=workers,
        config_path=config,
        verbose=verbose,
    )

    seed = SeedLayout.from_mapping(cfg.seed)
    indent = 2 if pretty else None

    if verbose:
        console.log("Exporting JSON")

    if out:
        export_plans_json(plans, out, state, seed, indent=indent)
    else:
        print(serialize_plans_to_json_string(plans, state, seed, indent=indent))

    if verbose:
        console.log("Export complete")
