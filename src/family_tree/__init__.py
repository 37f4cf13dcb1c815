"""
family_tree: build, browse and save a genealogical tree.

    from family_tree import FamilyTree, initialize_tree

    init = initialize_tree("family_tree.dat")
    init.tree.print_family_tree(0)
"""

from family_tree.bootstrap import TreeInit, TreeSource, initialize_tree
from family_tree.core.exceptions import (
    FamilyTreeError,
    PersonNotFoundError,
    TreeFormatError,
    TreeLoadError,
    TreeSaveError,
)
from family_tree.models import LIVING, Individual
from family_tree.seed import DEFAULT_ROOT_ID, build_default_family
from family_tree.tree import FamilyTree

__all__ = [
    "DEFAULT_ROOT_ID",
    "FamilyTree",
    "FamilyTreeError",
    "Individual",
    "LIVING",
    "PersonNotFoundError",
    "TreeFormatError",
    "TreeInit",
    "TreeLoadError",
    "TreeSaveError",
    "TreeSource",
    "build_default_family",
    "initialize_tree",
]
