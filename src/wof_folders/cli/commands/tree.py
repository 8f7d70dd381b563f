from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from wof_folders.cli.utils import load_plans
from wof_folders.core.pipeline import FolderPlan

console = Console()


def plan_to_tree(plan: FolderPlan, max_depth: Optional[int] = None) -> Tree:
    """Render one plan's folder paths as a Rich tree (leaves in green)."""
    tree = Tree(f"[bold]{escape(plan.source)}[/bold]")
    branches: Dict[str, Tree] = {}
    leaves = set(plan.leaves)

    for path in plan.folders:
        parts = path.split("/")
        if max_depth is not None and len(parts) > max_depth:
            continue
        parent = branches.get("/".join(parts[:-1]), tree)
        name = escape(parts[-1])
        label = f"[green]{name}[/green]" if path in leaves else name
        branches[path] = parent.add(label)

    return tree


def tree_command(
    sources: List[Path] = typer.Argument(..., exists=True, readable=True),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        "-d",
        min=1,
        help="Only show folders down to this depth",
    ),
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
    Print the folder tree that would be created.
    """
    plans, _, _ = load_plans(
        sources, countries=country, config_path=config, verbose=verbose
    )

    for plan in plans:
        console.print(plan_to_tree(plan, max_depth=max_depth))
