from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_tree.cli.shell import MenuShell
from family_tree.cli.utils import console, open_tree, resolve_root, say


def menu_command(
    data: Optional[Path] = typer.Option(
        None,
        "--data",
        "-d",
        help="Saved tree file (defaults to paths.data_file in config)",
    ),
    root: Optional[int] = typer.Option(
        None,
        "--root",
        "-r",
        help="Id of the person shown at the top of the tree",
    ),
):
    """
    Interactive menu: add people, print, save, restore defaults.
    """
    say("British Royal Family Tree Creator")
    say()

    init = open_tree(data)
    say()

    shell = MenuShell(
        init.tree,
        init.path,
        root_id=resolve_root(root),
        console=console,
    )
    shell.run()
