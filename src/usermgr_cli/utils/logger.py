"""Application logger writing to a rotating file in platformdirs user_log_dir.

Modules log through ``logging.getLogger(__name__)``; their records reach the
file once ``get_logger()`` has attached the handler to the ``usermgr_cli``
logger.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "usermgr_cli"
_LOG_FILE = "usermgr.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _file_handler(path: Path) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def get_logger() -> logging.Logger:
    """Return the application logger, attaching the file handler on first call.

    Handlers that other code put on the logger (capture handlers, console
    handlers) are left in place; only our own file handler is checked for.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    path = log_file_path()
    has_file_handler = any(
        isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == path.absolute()
        for h in logger.handlers
    )
    if not has_file_handler:
        logger.addHandler(_file_handler(path))
    logger.propagate = False

    _logger = logger
    return _logger
