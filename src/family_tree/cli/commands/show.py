from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_tree.cli.utils import console, open_tree, resolve_root


def show_command(
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Saved tree file"),
    root: Optional[int] = typer.Option(None, "--root", "-r", help="Root person id"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print the tree below a root person.
    """
    init = open_tree(data, verbose=verbose)
    init.tree.print_family_tree(resolve_root(root), console=console)
