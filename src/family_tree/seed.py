"""
Built-in British Royal family, from Queen Victoria to the children of
Queen Elizabeth II.

Loaded whenever no saved tree is available and on "restore default". The
insertion order fixes every id, so trees saved from this data stay
compatible with each other.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from family_tree.tree import FamilyTree

DEFAULT_ROOT_ID = 0

# (name, birth year, death year); -1 for the living.
ROYAL_FAMILY: List[Tuple[str, int, int]] = [
    ("Queen Victoria", 1819, 1901),
    ("Prince Albert of Saxe-Coburg and Gotha", 1819, 1861),
    ("King Edward VII", 1841, 1910),
    ("Alexandra of Denmark", 1844, 1925),
    ("King George V", 1865, 1936),
    ("Queen Mary of Teck", 1867, 1953),
    ("King Edward VIII (Duke of Windsor)", 1894, 1972),
    ("Wallis Simpson, Duchess of Windsor", 1896, 1986),
    ("King George VI", 1895, 1952),
    ("Elizabeth Bowes-Lyon (Queen Mother)", 1900, 2002),
    ("Queen Elizabeth II", 1926, 2022),
    ("Prince Philip, Duke of Edinburgh", 1921, 2021),
    ("Princess Margaret, Countess of Snowdon", 1930, 2002),
    ("King Charles III", 1948, -1),
    ("Diana, Princess of Wales", 1961, 1997),
    ("Queen Camilla", 1947, -1),
    ("Anne, Princess Royal", 1950, -1),
    ("Prince Andrew, Duke of York", 1960, -1),
    ("Prince Edward, Duke of Edinburgh", 1964, -1),
]

# (parent, child) by name, applied in order.
ROYAL_LINKS: List[Tuple[str, str]] = [
    ("Queen Victoria", "King Edward VII"),
    ("Prince Albert of Saxe-Coburg and Gotha", "King Edward VII"),
    ("King Edward VII", "King George V"),
    ("Alexandra of Denmark", "King George V"),
    ("King George V", "King Edward VIII (Duke of Windsor)"),
    ("Queen Mary of Teck", "King Edward VIII (Duke of Windsor)"),
    ("King George V", "King George VI"),
    ("Queen Mary of Teck", "King George VI"),
    ("King George VI", "Queen Elizabeth II"),
    ("Elizabeth Bowes-Lyon (Queen Mother)", "Queen Elizabeth II"),
    ("King George VI", "Princess Margaret, Countess of Snowdon"),
    ("Elizabeth Bowes-Lyon (Queen Mother)", "Princess Margaret, Countess of Snowdon"),
    ("Queen Elizabeth II", "King Charles III"),
    ("Prince Philip, Duke of Edinburgh", "King Charles III"),
    ("Queen Elizabeth II", "Anne, Princess Royal"),
    ("Prince Philip, Duke of Edinburgh", "Anne, Princess Royal"),
    ("Queen Elizabeth II", "Prince Andrew, Duke of York"),
    ("Prince Philip, Duke of Edinburgh", "Prince Andrew, Duke of York"),
    ("Queen Elizabeth II", "Prince Edward, Duke of Edinburgh"),
    ("Prince Philip, Duke of Edinburgh", "Prince Edward, Duke of Edinburgh"),
    # Charles is linked to both partners so they show up under him.
    ("King Charles III", "Diana, Princess of Wales"),
    ("King Charles III", "Queen Camilla"),
]


def build_default_family(tree: "FamilyTree") -> None:
    """Append the royal family to ``tree`` through its public API."""
    ids = {}
    for name, birth, death in ROYAL_FAMILY:
        ids[name] = tree.add_person(name, birth, death)

    for parent, child in ROYAL_LINKS:
        tree.connect_parent_child(ids[parent], ids[child])
