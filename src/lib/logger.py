"""Logging for shadowkit.

TIER 1: May import from core only.

Every module logs through a "shadowkit.<name>" logger with its own
stderr handler. The starting level comes from SHADOWKIT_LOG_LEVEL
(WARNING when unset); logging.level in the project config overrides
it once configure_from_config() runs.
"""

import logging
import os
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
TIME_FORMAT = "%H:%M:%S"

LEVEL_ENV_VAR = "SHADOWKIT_LOG_LEVEL"
FALLBACK_LEVEL = logging.WARNING

_registry: dict[str, logging.Logger] = {}


def _resolve_level(level: str | None) -> int:
    """Map a level name to its logging constant (unknown names -> WARNING)."""
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "")
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else FALLBACK_LEVEL


def _attach_handler(logger: logging.Logger) -> None:
    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=TIME_FORMAT))
    logger.addHandler(stream)
    logger.propagate = False


def get_logger(name: str, level: LogLevel | None = None) -> logging.Logger:
    """Return the shared logger for a shadowkit module.

    Args:
        name: Short module name; the logger is "shadowkit.<name>".
        level: Explicit level, applied only when the logger is first created.

    Example:
        >>> get_logger("loader").warning("Skipping %s", path)
        14:02:11 WARNING [shadowkit.loader] Skipping ...
    """
    qualified = f"shadowkit.{name}"
    cached = _registry.get(qualified)
    if cached is not None:
        return cached

    logger = logging.getLogger(qualified)
    if not logger.handlers:
        _attach_handler(logger)
        logger.setLevel(_resolve_level(level))

    _registry[qualified] = logger
    return logger


def set_log_level(level: LogLevel) -> None:
    """Change the level of every logger created so far."""
    numeric = _resolve_level(level)
    for logger in _registry.values():
        logger.setLevel(numeric)


def configure_from_config() -> None:
    """Apply logging.level from the project config, if set."""
    from lib.config import get

    level = get("logging.level")
    if level:
        set_log_level(str(level))
