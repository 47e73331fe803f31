"""
Logging Configuration.

This module provides the package logger factory. Every module obtains its
logger through `get_logger` so that output is formatted consistently and
handlers are never attached twice.
"""

import logging
import sys


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the projection engines.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_package_log_level(level: int) -> None:
    """Set the level of every logger created under the ``nzproj`` namespace.

    Parameters
    ----------
    level : int
        Logging level, e.g. ``logging.DEBUG`` to see derived constants.
    """
    prefix = "nzproj"
    manager = logging.Logger.manager
    for name, logger in list(manager.loggerDict.items()):
        if name == prefix or name.startswith(prefix + "."):
            if isinstance(logger, logging.Logger):
                logger.setLevel(level)
