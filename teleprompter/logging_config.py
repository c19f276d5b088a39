"""Logging configuration for the teleprompter."""

from __future__ import annotations

import logging

from .config import AppConfig

LOGGER_NAME = "teleprompter"
WARNINGS_LOGGER_NAME = "py.warnings"

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
# Ticks and speech updates run off the main thread, so the file log names it.
FILE_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(module)s:%(lineno)d | "
    "%(threadName)s | %(message)s"
)


def _reset_handlers(logger: logging.Logger) -> None:
    """Detach and close whatever an earlier ``setup_logging`` call attached."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _exclusive_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    _reset_handlers(logger)
    return logger


def _handler(handler: logging.Handler, level: str | int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(config: AppConfig) -> logging.Logger:
    """Console at ``log_level``, full detail to ``log_file``; warnings go to the file."""
    logger = _exclusive_logger(LOGGER_NAME)
    # Reset before the new file handler exists; it is shared with the app logger.
    warnings_logger = _exclusive_logger(WARNINGS_LOGGER_NAME)

    file_handler = _handler(
        logging.FileHandler(config.log_file, encoding="utf-8"),
        config.file_log_level,
        FILE_FORMAT,
    )
    logger.addHandler(_handler(logging.StreamHandler(), config.log_level, CONSOLE_FORMAT))
    logger.addHandler(file_handler)

    logging.captureWarnings(True)
    warnings_logger.addHandler(file_handler)
    return logger
