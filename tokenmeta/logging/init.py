from __future__ import annotations

import logging
import sys

"""Console logging: ``<LABEL> <message>`` lines on stdout.

Labels are INFO | WARN | ERROR | SUMMARY, plus DEBUG under --debug. The
progress bar and the SUMMARY line share stdout with these lines. Module
loggers under ``tokenmeta`` propagate into the logger configured here.
"""

__all__ = [
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "tokenmeta"

# between INFO (20) and WARNING (30)
SUMMARY_LEVEL = 25

_LABELS = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    SUMMARY_LEVEL: "SUMMARY",
}

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return f"{_LABELS.get(record.levelno, record.levelname)} {record.getMessage()}"


def setup_logging() -> logging.Logger:
    """Attach the stdout handler to the ``tokenmeta`` logger once and return it."""
    global _logger
    if _logger is None:
        logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
        app_logger = logging.getLogger(LOGGER_NAME)
        app_logger.handlers.clear()
        app_logger.setLevel(logging.INFO)
        app_logger.propagate = False

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(logging.INFO)
        console.setFormatter(LabeledFormatter())
        app_logger.addHandler(console)
        _logger = app_logger
    return _logger


def get_logger() -> logging.Logger:
    return _logger or setup_logging()


def log_summary(message: str) -> None:
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Forget the configured logger so the next setup_logging() starts over (tests)."""
    global _logger
    _logger = None
