"""
Config logging helpers.

Configuration code logs through a single installable logger so the hosting
application decides where startup messages go.
"""

import logging

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

# Global logger for config modules
_config_logger = None


def set_config_logger(logger):
    """Set the logger for config modules."""
    global _config_logger
    _config_logger = logger


def get_config_logger() -> logging.Logger:
    """Return the installed config logger, or the package logger."""
    if _config_logger is not None:
        return _config_logger
    return logging.getLogger("api_config")


def config_log(message: str, level: str = "INFO"):
    """Log message using config logger if available, otherwise the package logger."""
    get_config_logger().log(_LEVELS.get(level, logging.INFO), message)
