from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from family_tree.cli.utils import console, open_tree, resolve_root, say


def generations_command(
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Saved tree file"),
    root: Optional[int] = typer.Option(None, "--root", "-r", help="Root person id"),
):
    """
    List everyone reachable from the root, grouped by generation.
    """
    init = open_tree(data)
    root_id = resolve_root(root)
    generations = init.tree.get_generations(root_id)

    if not generations:
        say(f"[Invalid root index: {root_id}]")
        raise typer.Exit(code=1)

    table = Table(title=f"Generations under #{root_id}")
    table.add_column("Gen", justify="right", style="bold")
    table.add_column("Id", justify="right")
    table.add_column("Person")

    for g, members in enumerate(generations, start=1):
        for person_id in members:
            person = init.tree.get_person(person_id)
            table.add_row(str(g), str(person_id), person.describe())

    console.print(table)
