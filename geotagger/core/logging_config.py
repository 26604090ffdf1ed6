"""
Logging setup for the ``geotagger`` package.

Every module logs through ``logging.getLogger(__name__)``; this module only
attaches a console handler to the ``geotagger`` namespace logger.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("geotagger")


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the ``geotagger`` logger if it has none.

    Args:
        level: Level name (``"DEBUG"``) or numeric level for the namespace.

    Returns:
        The configured ``geotagger`` logger.
    """
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="[%(asctime)s] %(levelname)-8s %(name)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    return logger
