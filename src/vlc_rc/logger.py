"""
Logging setup shared by all vlc_rc modules.
"""

import logging
import os

PACKAGE_LOGGER = "vlc_rc"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_package_logger() -> logging.Logger:
    """Attach a stream handler to the package logger (once)."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger

    level_name = os.environ.get("VLC_RC_LOG_LEVEL", "INFO").upper()
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """
    Get a logger for a vlc_rc module.

    Args:
        name: Logger name, usually __name__

    Returns:
        Logger that propagates to the configured package logger
    """
    _configure_package_logger()
    return logging.getLogger(name)
