"""Centralized logging configuration for pdf-converter."""

import logging
import sys

PACKAGE_LOGGER = "pdf_converter"


class _BelowLevel(logging.Filter):
    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def configure_logging(quiet: bool = False, level: str | int = logging.INFO) -> logging.Logger:
    """Send status lines to stdout and warnings/errors to stderr.

    Quiet mode only lets errors through. Calling this again replaces the
    handlers installed by a previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(levelname)s %(message)s")

    out = logging.StreamHandler(sys.stdout)
    out.setFormatter(formatter)
    out.addFilter(_BelowLevel(logging.WARNING))

    err = logging.StreamHandler(sys.stderr)
    err.setFormatter(formatter)
    err.setLevel(logging.WARNING)

    logger.addHandler(out)
    logger.addHandler(err)
    logger.setLevel(logging.ERROR if quiet else level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Usage:
        from pdf_converter.logger_config import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
