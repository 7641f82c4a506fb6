"""Application logger for the task planner.

The model modules never configure logging. They log validation and rebuild
events at DEBUG through ``logging.getLogger(__name__)``, which makes them
children of the ``taskplanner`` logger. A host application calls
:func:`get_logger` once, optionally with its :class:`AppConfig`, to route
those records into a rotating file under the platform's user log directory.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING

from platformdirs import user_log_dir

if TYPE_CHECKING:
    from taskplanner.config import AppConfig

_APP_NAME = "taskplanner"
_LOG_FILE = "taskplanner.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)


def _file_handler(log_dir: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def get_logger(config: AppConfig | None = None) -> logging.Logger:
    """Return the singleton ``taskplanner`` logger, initialising it on first call.

    The level comes from ``config.log_level`` when a config is given and is
    DEBUG otherwise. Later calls return the logger as first configured.
    Handlers a host application already attached are left in place; the
    rotating file handler is added alongside them unless one is present.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(config.logging_level if config is not None else logging.DEBUG)
    if not _has_file_handler(logger):
        logger.addHandler(_file_handler(log_dir))
    # Keep planner records out of the host's root handlers.
    logger.propagate = False

    _logger = logger
    return _logger
