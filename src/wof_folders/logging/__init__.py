"""
Logging package for ``wof_folders``.

Use ``get_logger(__name__)`` in modules to reach the shared file and console
handlers.
"""

from .logger import (
    configure_logging,
    get_logger,
    set_debug,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_debug",
]
