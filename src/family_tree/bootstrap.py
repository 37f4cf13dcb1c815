"""
Start-up policy for a session: use the saved tree when it can be read,
otherwise fall back to the built-in family.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from family_tree.core.exceptions import TreeLoadError
from family_tree.logging import get_logger
from family_tree.tree import FamilyTree

log = get_logger(__name__)


class TreeSource(str, Enum):
    LOADED = "loaded"
    SEEDED = "seeded"


@dataclass
class TreeInit:
    tree: FamilyTree
    source: TreeSource
    path: Path
    error: Optional[TreeLoadError] = None

    @property
    def loaded(self) -> bool:
        return self.source is TreeSource.LOADED


def initialize_tree(path: Union[str, Path]) -> TreeInit:
    """
    Build the session tree from ``path``, seeding defaults on failure.

    Load failures are reported through ``TreeInit.error`` instead of raised.
    """
    data_path = Path(path)
    tree = FamilyTree()

    try:
        tree.load_from_file(data_path)
    except TreeLoadError as exc:
        log.warning(f"Could not load {data_path}: {exc}. Initializing default data.")
        tree.reset_to_default()
        return TreeInit(tree=tree, source=TreeSource.SEEDED, path=data_path, error=exc)

    log.info(f"Data loaded from {data_path} successfully")
    return TreeInit(tree=tree, source=TreeSource.LOADED, path=data_path)
