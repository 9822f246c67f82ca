"""Lib module - configuration and logging adapters.

TIER 1: May import from core only.
"""

from lib.config import clear_cache, get, get_config_path, get_project_root, load_config
from lib.logger import configure_from_config, get_logger, set_log_level

__all__ = [
    "clear_cache",
    "configure_from_config",
    "get",
    "get_config_path",
    "get_logger",
    "get_project_root",
    "load_config",
    "set_log_level",
]
