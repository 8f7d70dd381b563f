from __future__ import annotations

import typer

from wof_folders.cli.commands.plan import plan_command
from wof_folders.cli.commands.stats import stats_command
from wof_folders.cli.commands.tree import tree_command

app = typer.Typer(
    name="wof-folders",
    help="Rebuild the Who's On First place hierarchy as a folder plan",
    add_completion=False,
)

app.command("plan")(plan_command)
app.command("stats")(stats_command)
app.command("tree")(tree_command)


def main():
    app()


if __name__ == "__main__":
    main()
