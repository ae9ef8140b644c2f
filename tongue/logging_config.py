"""Logging configuration for tongue

Command output (entries, usage hints, warnings about indices) is printed
to stdout; log records go to stderr so both can be redirected separately.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "tongue"

CONCISE_FORMAT = "%(levelname)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(debug: bool, verbose: bool, default: str = "WARNING") -> str:
    """Map the --debug / --verbose switches onto a logging level name.

    --debug wins over --verbose; without either the configured default
    applies, so informational messages stay quiet unless asked for.
    """
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return default.upper()


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Setup logging configuration

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to append detailed records to
        stream: Console stream, stderr when omitted

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    level_upper = level.upper()
    logger.setLevel(getattr(logging, level_upper))

    # Each invocation reconfigures from scratch
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_fmt = DETAILED_FORMAT if level_upper == "DEBUG" else CONCISE_FORMAT
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(logging.Formatter(console_fmt, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
