"""
Logging configuration for the Phone Store API.

``setup_logging`` configures the root logger with a console handler and
an optional file handler.  Request lines are written by
``AccessLogMiddleware`` to the ``phone_store_api.access`` logger, so
uvicorn's own access log is muted to avoid printing every request twice.
"""

import logging
from pathlib import Path
from typing import Optional

ACCESS_LOGGER = "phone_store_api.access"

# Loggers whose output duplicates ``ACCESS_LOGGER``.
_QUIET_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Does nothing if the root logger already has handlers (tests and
    repeated ``create_app`` calls).

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives the same records as the console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Access lines are informational; keep them unless the level is stricter.
    logging.getLogger(ACCESS_LOGGER).setLevel(max(numeric_level, logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
