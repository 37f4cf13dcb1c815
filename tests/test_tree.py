from __future__ import annotations

import dataclasses
import logging

import pytest

from family_tree.core.exceptions import PersonNotFoundError
from family_tree.tree import FamilyTree


def test_add_person_assigns_sequential_ids(tree: FamilyTree) -> None:
    ids = [tree.add_person(f"P{i}", 1900 + i) for i in range(5)]
    assert ids == [0, 1, 2, 3, 4]
    assert tree.size() == len(tree) == 5


def test_add_person_default_death_year_is_living(tree: FamilyTree) -> None:
    person_id = tree.add_person("Alive", 1990)
    assert tree.get_person(person_id).death_year == -1


def test_connect_parent_child_appends_once_per_call(tree: FamilyTree) -> None:
    parent = tree.add_person("Parent", 1900)
    child = tree.add_person("Child", 1930)

    assert tree.connect_parent_child(parent, child) is True
    assert tree.get_person(parent).children == (child,)

    # Double-linking is the caller's problem, and is kept.
    tree.connect_parent_child(parent, child)
    assert tree.get_person(parent).children == (child, child)


def test_two_parents_may_share_a_child(tree: FamilyTree) -> None:
    mother = tree.add_person("Mother", 1900)
    father = tree.add_person("Father", 1898)
    child = tree.add_person("Child", 1930)
    tree.connect_parent_child(mother, child)
    tree.connect_parent_child(father, child)

    assert tree.get_person(mother).children == (child,)
    assert tree.get_person(father).children == (child,)


@pytest.mark.parametrize("parent, child", [(0, 5), (5, 0), (-1, 0), (0, -1), (2, 2)])
def test_connect_out_of_range_is_a_silent_no_op(
    tree: FamilyTree, parent: int, child: int
) -> None:
    tree.add_person("Only", 1900)
    tree.add_person("Other", 1901)

    assert tree.connect_parent_child(parent, child) is False
    assert tree.get_person(0).children == ()
    assert tree.get_person(1).children == ()


def test_skipped_link_is_logged_as_warning(tree: FamilyTree, caplog) -> None:
    tree.add_person("Only", 1900)
    logger = logging.getLogger("family_tree.tree")
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.WARNING, logger="family_tree.tree"):
            tree.connect_parent_child(0, 9)
    finally:
        logger.removeHandler(caplog.handler)

    assert any("0 -> 9" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("person_id", [-1, 1, 100])
def test_get_person_out_of_range_raises(tree: FamilyTree, person_id: int) -> None:
    tree.add_person("Only", 1900)
    with pytest.raises(PersonNotFoundError):
        tree.get_person(person_id)


def test_person_not_found_is_an_index_error(tree: FamilyTree) -> None:
    with pytest.raises(IndexError):
        tree.get_person(0)


def test_people_snapshot_is_read_only(tree: FamilyTree) -> None:
    tree.add_person("A", 1900)
    snapshot = tree.people
    tree.add_person("B", 1901)
    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 1
    assert [p.name for p in tree] == ["A", "B"]


def test_reset_to_default_discards_custom_people(tree: FamilyTree) -> None:
    tree.add_person("Custom", 2000)
    tree.reset_to_default()
    assert tree.size() == 19
    assert tree.get_person(0).name == "Queen Victoria"
    assert all(p.name != "Custom" for p in tree)


def test_get_person_returns_a_copy(tree: FamilyTree) -> None:
    parent = tree.add_person("Parent", 1900)
    child = tree.add_person("Child", 1930)
    tree.connect_parent_child(parent, child)

    person = tree.get_person(parent)
    with pytest.raises(dataclasses.FrozenInstanceError):
        person.name = "Renamed"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        person.children.append(0)  # type: ignore[attr-defined]

    for view in tree.people:
        with pytest.raises(dataclasses.FrozenInstanceError):
            view.birth_year = 0  # type: ignore[misc]

    assert tree.get_person(parent).name == "Parent"
    assert tree.get_person(parent).children == (child,)
    assert tree.render_family_tree(parent) == [
        " [Gen 1] Parent (b. 1900)",
        "   \\--- [Gen 2] Child (b. 1930)",
    ]
