"""
CLI command modules for wof_folders.

Each command module defines a single Typer-compatible command function.
"""

from wof_folders.cli.commands.plan import plan_command
from wof_folders.cli.commands.stats import stats_command
from wof_folders.cli.commands.tree import tree_command

__all__ = [
    "plan_command",
    "stats_command",
    "tree_command",
]
