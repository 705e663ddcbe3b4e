"""
app/core/logger.py

Centralised logging configuration.
Every module should obtain its logger via:

    from app.core.logger import get_logger
    logger = get_logger(__name__)

The root logger is configured once at import time from ``settings.debug``.
"""

import logging
import logging.config
from typing import Any, Dict

from app.core.config import settings

#: Third-party loggers held at WARNING. The Supabase client goes through
#: httpx, which logs one INFO line per storage request.
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "hpack")


def build_logging_config(debug: bool) -> Dict[str, Any]:
    """Return a ``dictConfig`` schema: one stdout handler, pipe-separated lines."""
    level = "DEBUG" if debug else "INFO"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "pipe": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "pipe",
                "level": level,
            },
        },
        "root": {"level": level, "handlers": ["stdout"]},
        "loggers": {name: {"level": "WARNING"} for name in _QUIET_LOGGERS},
    }


def configure_logging(debug: bool = False) -> bool:
    """
    Install the stdout handler on the root logger.

    Does nothing if the root logger already has handlers (uvicorn's own
    config, pytest's capture).

    Returns:
        True if the configuration was applied.
    """
    if logging.getLogger().handlers:
        return False
    logging.config.dictConfig(build_logging_config(debug))
    return True


configure_logging(settings.debug)


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger.

    Usage
    -----
    >>> logger = get_logger(__name__)
    >>> logger.info("Application received")
    """
    return logging.getLogger(name)
