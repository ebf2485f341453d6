"""Logging configuration for the pulse-export CLI.

Log records go to stderr. stdout carries nothing but the path of the
written document, so the CLI can be used in shell pipelines.
"""

import logging
import sys

APP_LOGGER = "pulse_export"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "INFO", verbose: bool = False) -> logging.Logger:
    """Configure logging for an export run.

    Args:
        level: Level name from config, case-insensitive
        verbose: Force DEBUG and timestamped records (the CLI's ``-v``)

    Returns:
        The configured application logger
    """
    name = "DEBUG" if verbose else level.upper()
    unknown = name not in LEVELS
    if unknown:
        name = "INFO"

    # lxml and other libraries stay quiet below WARNING
    logging.basicConfig(
        level=logging.WARNING,
        format=VERBOSE_FORMAT if verbose else LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(getattr(logging, name))

    if unknown:
        app_logger.warning("Unknown log level '%s', defaulting to INFO", level)
    return app_logger
