from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_tree.cli.utils import open_tree, say
from family_tree.core.exceptions import TreeSaveError
from family_tree.models import LIVING


def add_command(
    name: str = typer.Argument(..., help="Name of the new person"),
    birth: int = typer.Argument(..., help="Birth year"),
    death: int = typer.Option(LIVING, "--death", help="Death year, -1 if still alive"),
    parent: Optional[int] = typer.Option(
        None,
        "--parent",
        "-p",
        help="Id of an existing parent to link the new person under",
    ),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Saved tree file"),
):
    """
    Add one person, optionally link a parent, and save.
    """
    init = open_tree(data)
    tree = init.tree

    new_id = tree.add_person(name, birth, death)
    if parent is not None and not tree.connect_parent_child(parent, new_id):
        say(f"[Warning] No person #{parent}; {name} was added without a parent.")

    try:
        tree.save_to_file(init.path)
    except TreeSaveError as exc:
        say(f"[Error saving file: {exc}]")
        raise typer.Exit(code=1)

    say(f"[New Person Added] #{new_id} {tree.get_person(new_id).describe()}")
