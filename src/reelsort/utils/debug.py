"""Logging setup for reelsort.

All modules log through ``logging.getLogger(__name__)`` under the ``reelsort``
namespace. setup_logger attaches one console handler to that namespace; debug
output is enabled by the ``--debug`` CLI flag or the REELSORT_DEBUG environment
variable.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "[%(levelname)s] %(asctime)s %(message)s"

_handler: Optional[logging.StreamHandler] = None


def debug_enabled() -> bool:
    """Return True if REELSORT_DEBUG asks for debug output."""
    return os.getenv("REELSORT_DEBUG", "0").lower() in {"1", "true", "yes", "on"}


def setup_logger(debug: bool = False) -> logging.Logger:
    """Configure and return the package logger.

    Safe to call more than once; the handler is only added the first time. Each
    call re-targets it at the current sys.stderr and updates the level.

    Args:
        debug: Force DEBUG level regardless of the environment.
    """
    global _handler
    logger = logging.getLogger("reelsort")
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    else:
        _handler.setStream(sys.stderr)
    logger.setLevel(logging.DEBUG if debug or debug_enabled() else logging.INFO)
    return logger
