"""
Application logging: the console plus a rotating log file, every record
tagged with the session id of this process.
"""
from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from notekeeper.settings import APP_NAME, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 5


class EnsureSessionFilter(logging.Filter):
    """Records logged without the adapter still get a session."""
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {}).setdefault("session", SESSION_ID)
        return msg, kwargs


def _configure(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(EnsureSessionFilter())
    return handler


def open_log_file(log_path: Path) -> RotatingFileHandler | None:
    """Rotating handler for `log_path`, or None when the file cannot be opened."""
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    except OSError:
        return None


def setup_logging(log_path: Path = LOG_PATH) -> logging.Logger:
    """
    Configure the application logger once; later calls return it unchanged.
    Module loggers (notekeeper.*) propagate into it.
    """
    logger = logging.getLogger(APP_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout or sys.stderr)
    logger.addHandler(_configure(console, logging.INFO, formatter))

    log_file = open_log_file(Path(log_path))
    if log_file is None:
        logger.warning("File logging disabled: cannot open %s", log_path)
        return logger

    logger.addHandler(_configure(log_file, logging.DEBUG, formatter))
    logger.debug("Logging initialized. log_file=%s", log_path)
    return logger


setup_logging()


def get_logger(name: str) -> SessionAdapter:
    """Session-tagged logger for a notekeeper module."""
    return SessionAdapter(logging.getLogger(name), {})
