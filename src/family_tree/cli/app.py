from __future__ import annotations

import typer

from family_tree.cli.commands.add import add_command
from family_tree.cli.commands.generations import generations_command
from family_tree.cli.commands.menu import menu_command
from family_tree.cli.commands.reset import reset_command
from family_tree.cli.commands.show import show_command
from family_tree.cli.commands.stats import stats_command

app = typer.Typer(
    name="family-tree",
    help="Build, browse and save a family tree",
    add_completion=False,
)

app.command("menu")(menu_command)
app.command("show")(show_command)
app.command("generations")(generations_command)
app.command("stats")(stats_command)
app.command("add")(add_command)
app.command("reset")(reset_command)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context):
    """
    Without a command, start the interactive menu.
    """
    if ctx.invoked_subcommand is None:
        menu_command(data=None, root=None)


def main():
    app()


if __name__ == "__main__":
    main()
