import os
from pathlib import Path

import yaml

CONFIG_NAME = Path("config") / "family_tree.yml"
# Source checkout location; unused once installed into site-packages.
CONFIG_PATH = Path(__file__).resolve().parents[2] / CONFIG_NAME
CONFIG_ENV_VAR = "FAMILY_TREE_CONFIG"


class FTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.tree = data.get("tree", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def data_file(self) -> Path:
        return Path(self.paths.get("data_file", "family_tree.dat"))

    @property
    def root_id(self) -> int:
        return int(self.tree.get("root_id", 0))


def config_path() -> Path:
    """Env override, then ./config/family_tree.yml, then the checkout copy."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    local = Path.cwd() / CONFIG_NAME
    return local if local.exists() else CONFIG_PATH


def load_config(path: Path | None = None) -> 'FTConfig':
    path = path or config_path()
    if not path.exists():
        # Installed without the project tree: run on built-in defaults.
        return FTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data)


_config_cache = None


def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
