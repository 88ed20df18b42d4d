"""
Configuration centralisée des logs.

Usage:
    from beerstock.app.core.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from functools import cache

from beerstock.app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_root_logger() -> None:
    root = logging.getLogger()

    # Ne touche pas à une config existante (uvicorn, pytest...)
    if root.handlers:
        return

    level = getattr(logging, settings.log_level, logging.INFO)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # SQL verbeux seulement via DATABASE_ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
