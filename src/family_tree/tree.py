from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Deque, Iterator, List, Optional, Set, Tuple, Union

from rich.console import Console

from family_tree.core.exceptions import PersonNotFoundError
from family_tree.exporter import write_tree_file
from family_tree.loader import read_tree_file
from family_tree.logging import get_logger
from family_tree.models import LIVING, Individual, PersonView
from family_tree.seed import build_default_family

log = get_logger(__name__)

LAST_BRANCH = "\\---"
MID_BRANCH = "|---"
LAST_INDENT = "   "
MID_INDENT = "|  "


class FamilyTree:
    """
    A flat, append-only collection of people linked by position.

    Every person is identified by its index in the collection. Parent/child
    relationships are stored as child ids on the parent, so a child shared by
    two parents is simply listed by both. Nothing is ever removed, which keeps
    ids stable for the lifetime of the tree and across save/load.
    """

    def __init__(self) -> None:
        self._people: List[Individual] = []

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[PersonView]:
        return (person.view() for person in self._people)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<FamilyTree people={len(self._people)}>"

    def size(self) -> int:
        return len(self._people)

    def contains(self, person_id: int) -> bool:
        return 0 <= person_id < len(self._people)

    @property
    def people(self) -> Tuple[PersonView, ...]:
        return tuple(person.view() for person in self._people)

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def add_person(self, name: str, birth_year: int, death_year: int = LIVING) -> int:
        """Append a new person and return its id."""
        self._people.append(Individual(name, birth_year, death_year))
        person_id = len(self._people) - 1
        log.debug(f"Added #{person_id}: {name}")
        return person_id

    def connect_parent_child(self, parent_id: int, child_id: int) -> bool:
        """
        Record ``child_id`` as a child of ``parent_id``.

        Links naming an id outside the tree are skipped without raising; the
        return value tells whether the link was made.
        """
        if not (self.contains(parent_id) and self.contains(child_id)):
            log.warning(
                f"Ignoring link {parent_id} -> {child_id}: "
                f"ids must be in [0, {len(self._people)})"
            )
            return False

        self._people[parent_id].add_child(child_id)
        return True

    def get_person(self, person_id: int) -> PersonView:
        """Return a read-only copy of one person; links go through connect_parent_child."""
        if not self.contains(person_id):
            raise PersonNotFoundError(person_id, len(self._people))
        return self._people[person_id].view()

    def clear(self) -> None:
        self._people = []

    def reset_to_default(self) -> None:
        """Discard every person and rebuild the built-in family."""
        self.clear()
        build_default_family(self)
        log.info("All custom changes discarded. Restored default data.")

    # ------------------------------------------------------------------ #
    # Traversal
    # ------------------------------------------------------------------ #

    def _render_from(self, root_id: int) -> Iterator[str]:
        # Stack entries: (id, prefix, is_last, generation).
        stack: List[Tuple[int, str, bool, int]] = [(root_id, "", True, 1)]

        while stack:
            person_id, prefix, is_last, generation = stack.pop()
            person = self._people[person_id]
            connector = (LAST_BRANCH if is_last else MID_BRANCH) if prefix else ""
            yield f"{prefix}{connector} [Gen {generation}] {person.describe()}"

            child_prefix = prefix + (LAST_INDENT if is_last else MID_INDENT)
            kids = [c for c in person.children if self.contains(c)]
            # Pushed last-first so the first child is rendered next.
            for i in range(len(kids) - 1, -1, -1):
                stack.append((kids[i], child_prefix, i == len(kids) - 1, generation + 1))

    def render_family_tree(self, root_id: int) -> List[str]:
        """
        Render the descendants of ``root_id`` depth-first, one line each.

        A child reachable through two parents is rendered under both.
        An unknown root produces a single diagnostic line.
        """
        if not self.contains(root_id):
            log.warning(f"Invalid root index: {root_id}")
            return [f"[Invalid root index: {root_id}]"]
        return list(self._render_from(root_id))

    def print_family_tree(self, root_id: int, console: Optional[Console] = None) -> None:
        console = console or Console()
        for line in self.render_family_tree(root_id):
            console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def get_generations(self, root_id: int) -> List[List[int]]:
        """
        Group everyone reachable from ``root_id`` by distance from it.

        ``result[0] == [root_id]``; each id lands in the first layer where it
        is discovered, so people with two linked parents appear once.
        """
        result: List[List[int]] = []
        if not self.contains(root_id):
            return result

        visited: Set[int] = {root_id}
        queue: Deque[Tuple[int, int]] = deque([(root_id, 0)])

        while queue:
            current, gen = queue.popleft()
            if gen >= len(result):
                result.append([])
            result[gen].append(current)

            for child_id in self._people[current].children:
                if child_id not in visited and self.contains(child_id):
                    visited.add(child_id)
                    queue.append((child_id, gen + 1))

        return result

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    def save_to_file(self, path: Union[str, Path]) -> Path:
        return write_tree_file(self._people, path)

    def load_from_file(self, path: Union[str, Path]) -> None:
        """
        Replace the current people with those saved in ``path``.

        The file is parsed completely before anything is replaced, so a
        failed load leaves the tree untouched. Child ids outside the loaded
        range are dropped.

        Raises:
            TreeLoadError: if the file cannot be read.
            TreeFormatError: if the file is malformed.
        """
        records = read_tree_file(path)
        count = len(records)

        people = [Individual(r.name, r.birth_year, r.death_year) for r in records]
        for parent_id, record in enumerate(records):
            for child_id in record.children:
                if 0 <= child_id < count:
                    people[parent_id].add_child(child_id)
                else:
                    log.warning(
                        f"Dropping child id {child_id} of #{parent_id} "
                        f"(line {record.lineno}): out of range"
                    )

        self._people = people
        log.info(f"Loaded {count} people from {path}")
