from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from family_tree.cli.utils import console, open_tree, resolve_root


def stats_command(
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Saved tree file"),
    root: Optional[int] = typer.Option(None, "--root", "-r", help="Root person id"),
):
    """
    Show summary statistics for the tree.
    """
    init = open_tree(data)
    tree = init.tree
    generations = tree.get_generations(resolve_root(root))

    table = Table(title="Family Tree Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("People", str(len(tree)))
    table.add_row("Living", str(sum(1 for p in tree if p.is_living)))
    table.add_row("Child links", str(sum(len(p.children) for p in tree)))
    table.add_row("Generations", str(len(generations)))
    table.add_row("Reachable from root", str(sum(len(g) for g in generations)))

    console.print(table)
