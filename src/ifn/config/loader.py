import os
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATH = Path("ifn.config.yaml")
DEFAULT_DATABASE_URL = "sqlite:///ifn.db"
CONFIG_ENV_VAR = "IFN_CONFIG"


def resolve_config_path(path: Path | None = None) -> Path:
    """Explicit path first, then $IFN_CONFIG, then ./ifn.config.yaml."""
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load the YAML configuration file.

    Args:
        path: Optional config path. Defaults to $IFN_CONFIG or ifn.config.yaml

    Returns:
        Configuration dictionary (empty file yields {})

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the document is not a mapping
    """
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")
    for section in ("storage", "logging", "export"):
        if section in config and not isinstance(config[section], dict):
            raise ValueError(f"Config section '{section}' must be a dictionary")
    return config


def get_database_url(config: Dict[str, Any]) -> str:
    """Record store URL: storage.database_url, else storage.sqlite_path, else sqlite:///ifn.db."""
    storage = config.get("storage", {}) or {}
    if storage.get("database_url"):
        return storage["database_url"]
    if storage.get("sqlite_path"):
        return f"sqlite:///{storage['sqlite_path']}"
    return DEFAULT_DATABASE_URL


def get_log_level(config: Dict[str, Any]) -> str:
    return (config.get("logging", {}) or {}).get("level", "INFO")


def get_export_indent(config: Dict[str, Any]) -> int | None:
    return (config.get("export", {}) or {}).get("indent", 2)
