"""Configuration management.

TIER 1: May import from core only.

Config lives in <project root>/.shadowkit/config.jsonc (or config.json)
and is read with dot-notation keys.
"""

import json
import os
from pathlib import Path
from typing import Any

from core.errors import ConfigError
from core.jsonc import loads as loads_jsonc

# Cache for loaded config
_config_cache: dict | None = None
_project_root_cache: Path | None = None

CONFIG_DIR = ".shadowkit"

# Config file names (priority order)
CONFIG_FILES = ["config.jsonc", "config.json"]

ROOT_ENV_VAR = "SHADOWKIT_PROJECT_ROOT"

DEFAULTS: dict[str, Any] = {
    "manifests": {
        "scan_patterns": ["**/manifest.jsonc", "**/manifest.json"],
        "exclude_dirs": ["node_modules", ".git", ".venv", "__pycache__"],
    },
    "plan": {
        "purpose_max_length": 50,
        "suite_prefix": "@manifest:",
    },
    "logging": {
        "level": None,
    },
}


def get_project_root() -> Path:
    """Get the project root directory.

    Uses SHADOWKIT_PROJECT_ROOT if set, otherwise walks up from the
    current directory looking for .shadowkit/ or .git/.

    Returns:
        Project root path.

    Raises:
        ConfigError: If project root cannot be found.
    """
    global _project_root_cache

    if _project_root_cache is not None:
        return _project_root_cache

    if env_root := os.environ.get(ROOT_ENV_VAR):
        _project_root_cache = Path(env_root)
        return _project_root_cache

    current = Path.cwd()
    for candidate in (current, *current.parents):
        if (candidate / CONFIG_DIR).exists() or (candidate / ".git").exists():
            _project_root_cache = candidate
            return _project_root_cache

    raise ConfigError(f"Could not find project root (no {CONFIG_DIR}/ or .git/ found)")


def get_config_path(root: Path | None = None) -> Path | None:
    """Find config file path.

    Args:
        root: Project root to look under (default: get_project_root()).

    Returns:
        Path to config file, or None if not found.
    """
    config_dir = (root if root is not None else get_project_root()) / CONFIG_DIR

    for filename in CONFIG_FILES:
        config_path = config_dir / filename
        if config_path.exists():
            return config_path

    return None


def _read_config(config_path: Path | None) -> dict:
    if config_path is None:
        return {}

    try:
        config = loads_jsonc(config_path.read_text())
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path.name}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid {config_path.name}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Invalid {config_path.name}: top level must be an object")

    return config


def load_config(root: Path | None = None) -> dict:
    """Load config from .shadowkit/config.jsonc or config.json.

    Args:
        root: Read the config of this directory instead of the project
            root. Such reads are not cached.

    Returns:
        Configuration dictionary (empty if there is no project root
        or no config file).

    Raises:
        ConfigError: If the config file cannot be read or parsed.
    """
    global _config_cache

    if root is not None:
        return _read_config(get_config_path(root))

    if _config_cache is not None:
        return _config_cache

    try:
        config_path = get_config_path()
    except ConfigError:
        # Outside any project: built-in defaults only
        config_path = None

    _config_cache = _read_config(config_path)
    return _config_cache


def _lookup(config: dict, parts: list[str]) -> tuple[bool, Any]:
    value: Any = config
    for part in parts:
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return False, None
    return True, value


def get(key: str, default: Any = None, root: Path | None = None) -> Any:
    """Get config value by dot notation.

    Falls back to the built-in DEFAULTS, then to default.

    Args:
        key: Dot-separated key path (e.g., "manifests.scan_patterns").
        default: Default value if key is found nowhere.
        root: Project root whose config is read (default: the current project).

    Returns:
        Config value or default.

    Example:
        get("plan.purpose_max_length")  # 50 unless configured
    """
    parts = key.split(".")

    found, value = _lookup(load_config(root), parts)
    if found:
        return value

    found, value = _lookup(DEFAULTS, parts)
    if found and value is not None:
        return value

    return default


def clear_cache() -> None:
    """Clear config cache (for testing)."""
    global _config_cache, _project_root_cache
    _config_cache = None
    _project_root_cache = None
