from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from rich.console import Console

from family_tree.bootstrap import TreeInit, initialize_tree
from family_tree.config import get_config

console = Console()


def resolve_data_path(data: Optional[Path]) -> Path:
    """Command-line path if given, else ``paths.data_file`` from config."""
    return data if data is not None else get_config().data_file


def resolve_root(root: Optional[int]) -> int:
    return root if root is not None else get_config().root_id


def open_tree(data: Optional[Path], *, verbose: bool = False) -> TreeInit:
    """
    Load the session tree, falling back to the built-in family.
    """
    path = resolve_data_path(data)

    t0 = time.perf_counter()
    init = initialize_tree(path)
    elapsed = time.perf_counter() - t0

    if init.loaded:
        say(f"[Data loaded from '{path}' successfully.]")
    else:
        say(f"[Warning] Could not load file: {init.error}")
        say("[Initializing default British Royal data...]")

    if verbose:
        console.log(f"Opened {len(init.tree)} people in {elapsed:.3f}s")

    return init


def say(message: str = "", *, out: Optional[Console] = None) -> None:
    """Print plain text; square brackets are literal, not Rich markup."""
    (out or console).print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)
