"""Logging configuration that routes standard library logging through loguru."""

from __future__ import annotations

import logging
import sys

from loguru import logger

from tagselector.config import TAGSELECTOR_LOG_LEVEL

_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level> {extra}"
)
# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller that issued the logging call
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        extra = {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRS}
        logger.bind(**extra).opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = TAGSELECTOR_LOG_LEVEL) -> None:
    """Send all logging to stderr through loguru at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; pass structured fields with ``extra={...}``."""
    return logging.getLogger(name)
