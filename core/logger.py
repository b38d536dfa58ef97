"""Application logging.

Every module asks `get_logger` for a named logger. All of them share one
console handler and one size-rotated file under ``LOG_DIR`` so that the
service, router and error-handler output ends up interleaved in a single
``recomp.log``.

Environment:
    LOG_DIR: Directory for the log file (default: ``logs/`` at the repo root).
    LOG_LEVEL: Level name such as DEBUG or WARNING (default: INFO).
    LOG_MAX_BYTES / LOG_BACKUP_COUNT: Rotation size and number of old files.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
LOG_FILE = os.path.join(LOG_DIR, "recomp.log")
LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handlers: Optional[List[logging.Handler]] = None


def _shared_handlers() -> List[logging.Handler]:
    """Create the console and rotating file handlers on first use."""
    global _handlers
    if _handlers is None:
        os.makedirs(LOG_DIR, exist_ok=True)
        formatter = logging.Formatter(LOG_FORMAT)
        console = logging.StreamHandler()
        rotating = RotatingFileHandler(LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)
        for handler in (console, rotating):
            handler.setFormatter(formatter)
        _handlers = [console, rotating]
    return _handlers


def get_logger(name: str = __name__, level: int = LOG_LEVEL) -> logging.Logger:
    """Return a named logger wired to the shared handlers.

    Calling this repeatedly for the same name is safe: handlers are only
    attached the first time.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        for handler in _shared_handlers():
            logger.addHandler(handler)
        logger.propagate = False
    return logger
