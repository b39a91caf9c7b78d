"""
Logging setup for the Employee Directory API.

Handlers go on the root logger so uvicorn, FastAPI and the
``employee_api`` package share one format.  The service's own loggers
follow ``LOG_LEVEL``; the per-request ``uvicorn.access`` lines are only
kept when ``DEBUG`` is on.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "employee_api"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(settings: Settings) -> None:
    """Configure logging from ``settings``.

    Attaches a console handler, plus a file handler when
    ``settings.log_file`` is set, unless the root logger already has
    handlers (pytest, or a second ``create_app`` in the same process).
    Levels are applied on every call.
    """
    level = _level(settings.log_level)
    root = logging.getLogger()

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

        if settings.log_file:
            file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        root.setLevel(level)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if settings.debug else level)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if settings.debug else logging.WARNING)
