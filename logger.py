"""Logging setup shared by every module of the project."""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "layered_path"
LOG_LEVEL_ENV = "LAYERED_PATH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = logging.WARNING

# set once the root project logger has its handler
_CONFIGURED = False


def _level_from_env() -> int:
    raw = os.environ.get(LOG_LEVEL_ENV)
    if not raw:
        return DEFAULT_LEVEL
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else DEFAULT_LEVEL


def setup_root_logger(
    level: Optional[int] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the project root logger.

    Calling it again is a no-op until `reset_logging()` is called.

    Args:
        level: Logging level; read from LAYERED_PATH_LOG_LEVEL when omitted.
        handler: Custom handler (defaults to a stdout StreamHandler).
    """
    global _CONFIGURED

    if _CONFIGURED:
        return

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(_level_from_env() if level is None else level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # keep propagating so pytest's caplog sees the records
    root.propagate = True

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the project root logger.

    Module names (`__name__`) are flat here, so they are nested under
    LOGGER_NAME explicitly.
    """
    setup_root_logger()
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_log_level(level: int) -> None:
    """Change the level of every project logger."""
    setup_root_logger()
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Forget the current configuration (used by the tests)."""
    global _CONFIGURED
    _CONFIGURED = False

    root = logging.getLogger(LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
