import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "wof_folders.yml"

class WFConfig:
    def __init__(self, data, path=None):
        self.path = path
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.hierarchy = data.get("hierarchy", {}) or {}
        self.sources = data.get("sources", {}) or {}
        self.seed = data.get("seed", {}) or {}
        self.debug = data.get("debug", False)

def load_config(path=None) -> 'WFConfig':
    config_path = Path(path) if path else CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return WFConfig(data, path=config_path)

_config_cache = None

def get_config() -> 'WFConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def use_config(path) -> 'WFConfig':
    """Replace the cached configuration with the one at ``path``."""
    global _config_cache
    _config_cache = load_config(path)
    return _config_cache
