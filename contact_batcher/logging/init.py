from __future__ import annotations

import logging
import sys
from typing import TextIO

"""Operator-facing log output.

Everything the tool tells the operator is one line on stdout::

    INFO source file: data/clientes.xlsx
    WARN end row 900 exceeds the last data row (120); clamped
    SUMMARY records=119 range=2-120 ok=100 warn=12 bad=7 ...

Service modules only call ``logging.getLogger(__name__)``; their records reach
the single handler attached to the ``contact_batcher`` package logger here.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "enable_debug",
    "get_logger",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "contact_batcher"

# Sits between INFO and WARNING so the final line survives any INFO filter
SUMMARY_LEVEL = 25

_LABELS = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    SUMMARY_LEVEL: "SUMMARY",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}

_configured: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """``<LABEL> <message>``; unknown levels fall back to the level name."""

    def format(self, record: logging.LogRecord) -> str:
        label = _LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


def _stdout_handler(stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(LabeledFormatter())
    handler.setLevel(logging.INFO)
    return handler


def setup_logging() -> logging.Logger:
    """Attach the labeled stdout handler to the package logger once."""
    global _configured
    if _configured is not None:
        return _configured

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(_stdout_handler(sys.stdout))
    logger.setLevel(logging.INFO)
    # the root logger must not print the same line a second time
    logger.propagate = False

    _configured = logger
    return logger


def enable_debug(logger: logging.Logger) -> None:
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG)


def get_logger() -> logging.Logger:
    return _configured if _configured is not None else setup_logging()


def log_summary(message: str) -> None:
    """Emit ``message`` as the run's ``SUMMARY`` line."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Forget the configured logger; the next ``setup_logging`` rebinds stdout."""
    global _configured
    _configured = None
