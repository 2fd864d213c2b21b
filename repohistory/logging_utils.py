"""Handlers for the "repohistory" logger; the core itself only emits DEBUG records."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _build_handlers(file_path: str | None, max_bytes: int, backups: int) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(file_path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"))
    return handlers


def setup_logging(
    *,
    enabled: bool = True,
    debug: bool = False,
    logger_name: str = "repohistory",
    file_path: str | None = None,
    max_bytes: int = 500_000,
    backups: int = 3,
) -> logging.Logger:
    """
    (Re)configure `logger_name`. Handlers from a previous call are closed first.

    Disabled: a NullHandler, level WARNING (DEBUG with debug=True).
    Enabled: console, plus a rotating file when `file_path` is set; level INFO or DEBUG.
    """
    logger = logging.getLogger(logger_name)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    if not enabled:
        logger.setLevel(logging.DEBUG if debug else logging.WARNING)
        logger.addHandler(logging.NullHandler())
        return logger

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    fmt = logging.Formatter(LOG_FORMAT)
    for handler in _build_handlers(file_path, max_bytes, backups):
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    return logger
