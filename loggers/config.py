import logging
from typing import Dict, Optional, Union

# Default log levels for each logger
DEFAULT_LOG_LEVELS = {
    "betting": logging.INFO,
    "deck": logging.INFO,
    "game": logging.INFO,
    "player": logging.WARNING,
    "settlement": logging.INFO,
    "showdown": logging.INFO,
    "table": logging.INFO,
}


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper())
    return level


def configure_loggers(
    log_levels: Optional[Dict[str, Union[int, str]]] = None,
    base_level: Optional[Union[int, str]] = None,
) -> None:
    """Configure log levels for all loggers.

    Args:
        log_levels: Dictionary mapping logger names to their desired log levels.
                   Can use either logging constants (e.g. logging.INFO)
                   or level names as strings (e.g. "INFO").
        base_level: Session-wide level. Below INFO it replaces every default so
                   debug output is shown everywhere; at INFO or above it acts as
                   a floor, so quieter defaults (player) stay quiet.
    """
    levels = log_levels or {}
    base = _to_level(base_level) if base_level is not None else None

    for logger_name, default_level in DEFAULT_LOG_LEVELS.items():
        logger = logging.getLogger(f"loggers.{logger_name}_logger")

        if logger_name in levels:
            level = _to_level(levels[logger_name])
        elif base is None:
            level = default_level
        elif base < logging.INFO:
            level = base
        else:
            level = max(default_level, base)

        logger.setLevel(level)
