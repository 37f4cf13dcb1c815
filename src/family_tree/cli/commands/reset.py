from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_tree.cli.utils import resolve_data_path, say
from family_tree.core.exceptions import TreeSaveError
from family_tree.tree import FamilyTree


def reset_command(
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Saved tree file"),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Overwrite without asking",
    ),
):
    """
    Overwrite the saved tree with the built-in royal family.
    """
    path = resolve_data_path(data)
    if not yes:
        typer.confirm(f"Replace {path} with the default data?", abort=True)

    tree = FamilyTree()
    tree.reset_to_default()
    try:
        tree.save_to_file(path)
    except TreeSaveError as exc:
        say(f"[Error saving file: {exc}]")
        raise typer.Exit(code=1)

    say(f"[Restored default data to '{path}'.]")
