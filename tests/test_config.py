from __future__ import annotations

from pathlib import Path

from family_tree.config import CONFIG_ENV_VAR, config_path, load_config
from family_tree.utils import resolve_project_path


def test_project_config_is_loaded() -> None:
    cfg = load_config(resolve_project_path("config/family_tree.yml"))
    assert cfg.data_file == Path("family_tree.dat")
    assert cfg.root_id == 0
    assert cfg.logging["file"] == "family_tree.log"
    assert cfg.debug is False


def test_missing_config_falls_back_to_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.yml")
    assert cfg.data_file == Path("family_tree.dat")
    assert cfg.root_id == 0
    assert cfg.logging == {}


def test_partial_config(tmp_path: Path) -> None:
    path = tmp_path / "ft.yml"
    path.write_text("tree:\n  root_id: 4\npaths:\n", encoding="utf-8")

    cfg = load_config(path)
    assert cfg.root_id == 4
    assert cfg.paths == {}


def test_env_var_overrides_config_path(monkeypatch, tmp_path: Path) -> None:
    target = tmp_path / "other.yml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
    assert config_path() == target

    monkeypatch.delenv(CONFIG_ENV_VAR)
    assert config_path().name == "family_tree.yml"


def test_config_in_working_directory_wins(monkeypatch, tmp_path: Path) -> None:
    local = tmp_path / "config" / "family_tree.yml"
    local.parent.mkdir()
    local.write_text("tree:\n  root_id: 2\n", encoding="utf-8")
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)

    assert config_path() == local
    assert load_config().root_id == 2
