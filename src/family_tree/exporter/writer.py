"""
writer.py
Plain-text writer for saved family trees.

The format is the one ``family_tree.loader`` reads back:
- first line: number of people
- per person: name, birth year, death year, child count, child ids
- child ids are each followed by a single space; the line is written even
  when it is empty
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Union

from family_tree.core.exceptions import TreeSaveError
from family_tree.logging import get_logger
from family_tree.models import Individual, PersonView

PersonLike = Union[Individual, PersonView]

log = get_logger(__name__)


def sanitize_name(name: str) -> str:
    """Keep a name on one line so the record framing survives a round trip."""
    return name.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def iter_tree_lines(people: Iterable[PersonLike]) -> Iterator[str]:
    """Yield the saved representation line by line (newlines included)."""
    people = list(people)
    yield f"{len(people)}\n"
    for person in people:
        yield f"{sanitize_name(person.name)}\n"
        yield f"{person.birth_year}\n"
        yield f"{person.death_year}\n"
        yield f"{len(person.children)}\n"
        yield "".join(f"{child} " for child in person.children) + "\n"


def dump_tree(people: Iterable[PersonLike]) -> str:
    return "".join(iter_tree_lines(people))


def write_tree_file(people: Iterable[PersonLike], path: Union[str, Path]) -> Path:
    """
    Write ``people`` to ``path``.

    Raises:
        TreeSaveError: if the destination cannot be opened or written.
    """
    out_path = Path(path)
    payload = dump_tree(people)

    try:
        with out_path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(payload)
    except OSError as exc:
        log.error(f"Failed to save tree to {out_path}: {exc}")
        raise TreeSaveError(f"Failed to open file for saving: {out_path}") from exc

    log.info(f"Saved tree to {out_path}")
    return out_path
