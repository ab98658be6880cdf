"""The engine's and the application's loggers."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_NAME = "NODENS"
CLIENT_NAME = "APP"

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\033[m"
_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}

_core: logging.Logger | None = None
_client: logging.Logger | None = None


class _ColorFormatter(logging.Formatter):
    """Colours the whole line by level when writing to a terminal."""

    def __init__(self, use_color: bool) -> None:
        super().__init__(_FORMAT, _DATE_FORMAT)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = _COLORS.get(record.levelno) if self._use_color else None
        return f"{color}{text}{_RESET}" if color else text


def _make_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_ColorFormatter(bool(isatty and isatty())))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def init() -> None:
    """Set up the core and client loggers, writing every level to stdout."""
    global _core, _client
    _core = _make_logger(CORE_NAME)
    _client = _make_logger(CLIENT_NAME)


def core_logger() -> logging.Logger:
    """The engine's logger; :func:`init` must have been called."""
    if _core is None:
        raise RuntimeError("logging is not initialised; call init() first")
    return _core


def client_logger() -> logging.Logger:
    """The application's logger; :func:`init` must have been called."""
    if _client is None:
        raise RuntimeError("logging is not initialised; call init() first")
    return _client