"""
Logging for wof-folder-builder.

Every logger lives under the ``wof_folders`` namespace and reaches two
handlers owned by the namespace root:

* a log file in ``paths.logs_dir`` (``logging.file``, rotated when
  ``logging.rotate`` is set), and
* the console (stderr).

Levels come from the ``logging`` section of ``config/wof_folders.yml``. The
top-level ``debug`` flag, or ``set_debug(True)`` at runtime, drops both
handlers to DEBUG. Module loggers carry no handlers or levels of their own,
so a reconfiguration reaches all of them at once.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from wof_folders.config import get_config
from wof_folders.utils.pathing import resolve_project_path

BASE_LOGGER_NAME = "wof_folders"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

# debug flag the namespace handlers were last built for; None = not yet
_configured_debug: Optional[bool] = None


def _file_handler(cfg) -> logging.Handler:
    log_dir = resolve_project_path(cfg.paths.get("logs_dir") or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / (cfg.logging.get("file") or "wof_folders.log")

    if cfg.logging.get("rotate", False):
        return RotatingFileHandler(
            path,
            maxBytes=ROTATE_MAX_BYTES,
            backupCount=ROTATE_BACKUPS,
            encoding="utf-8",
        )
    return logging.FileHandler(path, encoding="utf-8")


def configure_logging(debug: Optional[bool] = None) -> logging.Logger:
    """
    (Re)build the namespace handlers.

    ``debug=None`` takes the flag from the config file. Calling this again
    replaces the previous handlers rather than stacking new ones.
    """
    global _configured_debug

    cfg = get_config()
    if debug is None:
        debug = bool(getattr(cfg, "debug", False))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)

    base = logging.getLogger(BASE_LOGGER_NAME)
    for handler in list(base.handlers):
        base.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in (_file_handler(cfg), logging.StreamHandler()):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        base.addHandler(handler)

    base.setLevel(level)
    base.propagate = False

    _configured_debug = debug
    return base


def set_debug(enabled: bool) -> None:
    """Switch every ``wof_folders`` logger to DEBUG (or back to the config level)."""
    if enabled != _configured_debug:
        configure_logging(enabled)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger inside the ``wof_folders`` namespace.

    Names outside it (``"tests.pipeline"``) are nested under it so they still
    reach the shared handlers.
    """
    if _configured_debug is None:
        configure_logging()

    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(
        BASE_LOGGER_NAME + "."
    ):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    return logging.getLogger(logger_name)
