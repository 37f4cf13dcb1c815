from family_tree.exporter.writer import (
    dump_tree,
    iter_tree_lines,
    sanitize_name,
    write_tree_file,
)

__all__ = [
    "dump_tree",
    "iter_tree_lines",
    "sanitize_name",
    "write_tree_file",
]
