"""
Logging setup for the roster service.

Only the ``roster_api`` logger namespace is configured here; the root
logger and Uvicorn's own ``uvicorn.*`` loggers are left to the server.
``setup_logging`` may be called once per app (tests build many apps in
one process): the level is updated every time, handlers are attached
once each.

``uvicorn_log_level`` maps the same ``LOG_LEVEL`` setting onto the
names Uvicorn's ``log_level`` option accepts, so the access log and
the service log agree.
"""

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAMESPACE = "roster_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Return the numeric level for ``level``; unknown names give INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def uvicorn_log_level(level: str) -> str:
    return logging.getLevelName(resolve_level(level)).lower()


def _has_console(logger: logging.Logger) -> bool:
    return any(type(h) is logging.StreamHandler for h in logger.handlers)


def _has_file(logger: logging.Logger, path: str) -> bool:
    return any(getattr(h, "baseFilename", None) == path for h in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the ``roster_api`` logger and return it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.
    logfile : Optional[str]
        Also write records to this file when given.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(resolve_level(level))
    # records are written by our own handlers; do not repeat them on root
    logger.propagate = False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_console(logger):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = str(Path(logfile).resolve())
        if not _has_file(logger, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
