from __future__ import annotations

import shutil
from pathlib import Path

from family_tree.bootstrap import TreeSource, initialize_tree
from family_tree.core.exceptions import TreeFormatError, TreeLoadError
from family_tree.utils import mock_file_path


def test_initialize_loads_existing_file() -> None:
    init = initialize_tree(mock_file_path("forward_refs.dat"))

    assert init.source is TreeSource.LOADED
    assert init.loaded
    assert init.error is None
    assert init.tree.size() == 3


def test_initialize_seeds_when_file_missing(tmp_path: Path) -> None:
    init = initialize_tree(tmp_path / "family_tree.dat")

    assert init.source is TreeSource.SEEDED
    assert isinstance(init.error, TreeLoadError)
    assert init.tree.size() == 19
    assert init.path == tmp_path / "family_tree.dat"


def test_initialize_seeds_when_file_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "family_tree.dat"
    shutil.copy(mock_file_path("truncated.dat"), path)

    init = initialize_tree(path)

    assert init.source is TreeSource.SEEDED
    assert isinstance(init.error, TreeFormatError)
    # No half-loaded people leak into the seeded tree.
    assert [p.name for p in init.tree][:2] == ["Queen Victoria", "Prince Albert of Saxe-Coburg and Gotha"]


def test_initialize_does_not_write_the_file(tmp_path: Path) -> None:
    path = tmp_path / "family_tree.dat"
    initialize_tree(path)
    assert not path.exists()
