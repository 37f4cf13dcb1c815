# src/family_tree/loader/__init__.py

"""
Public interface for reading saved family trees.

Intended usage from other parts of the project and tests:

    from family_tree.loader import (
        Line,
        LineCursor,
        TreeRecord,
        parse_tree_lines,
        read_tree_file,
    )
"""

from __future__ import annotations

from .reader import Line, LineCursor, TreeRecord, parse_tree_lines, read_tree_file

__all__ = [
    "Line",
    "LineCursor",
    "TreeRecord",
    "parse_tree_lines",
    "read_tree_file",
]
