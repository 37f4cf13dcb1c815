import io
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from rich.console import Console  # noqa: E402

from family_tree.tree import FamilyTree  # noqa: E402


@pytest.fixture
def tree() -> FamilyTree:
    return FamilyTree()


@pytest.fixture
def royal_tree() -> FamilyTree:
    t = FamilyTree()
    t.reset_to_default()
    return t


@pytest.fixture
def chain_tree() -> FamilyTree:
    """A -> B -> C, each an only child."""
    t = FamilyTree()
    a = t.add_person("A", 1900)
    b = t.add_person("B", 1930)
    c = t.add_person("C", 1960)
    t.connect_parent_child(a, b)
    t.connect_parent_child(b, c)
    return t


@pytest.fixture
def diamond_tree() -> FamilyTree:
    """A has children B and C, who both list D."""
    t = FamilyTree()
    a = t.add_person("A", 1900, 1970)
    b = t.add_person("B", 1925)
    c = t.add_person("C", 1927)
    d = t.add_person("D", 1950)
    t.connect_parent_child(a, b)
    t.connect_parent_child(a, c)
    t.connect_parent_child(b, d)
    t.connect_parent_child(c, d)
    return t


@pytest.fixture
def record_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)
