from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

# Death year recorded for people who are alive or whose death is unknown.
LIVING = -1


class _Lifespan:
    """Display helpers shared by stored records and their read-only views."""

    name: str
    birth_year: int
    death_year: int

    @property
    def is_living(self) -> bool:
        return self.death_year == LIVING

    def lifespan(self) -> str:
        """Return ``"b. 1819, d. 1901"`` or ``"b. 1948"`` for the living."""
        if self.is_living:
            return f"b. {self.birth_year}"
        return f"b. {self.birth_year}, d. {self.death_year}"

    def describe(self) -> str:
        return f"{self.name} ({self.lifespan()})"


@dataclass
class Individual(_Lifespan):
    """
    One person in a family tree.

    Attributes:
        name: Display name, no uniqueness constraint.
        birth_year: Year of birth. Never validated.
        death_year: Year of death, or ``LIVING`` (-1).
        children: Ids of this person's children in the owning tree, in the
            order they were linked (which is also printing order).
    """

    name: str
    birth_year: int
    death_year: int = LIVING
    children: List[int] = field(default_factory=list)

    def add_child(self, child_id: int) -> None:
        # Duplicates are kept; callers avoid double-linking.
        self.children.append(child_id)

    def view(self) -> "PersonView":
        return PersonView(self.name, self.birth_year, self.death_year, tuple(self.children))

    def __repr__(self) -> str:
        return f"<Individual {self.name!r} {self.lifespan()} children={self.children}>"


@dataclass(frozen=True)
class PersonView(_Lifespan):
    """Immutable copy of an ``Individual`` handed out by ``FamilyTree``."""

    name: str
    birth_year: int
    death_year: int = LIVING
    children: Tuple[int, ...] = ()
