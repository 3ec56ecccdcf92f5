"""
Logging service for centralized log management.
"""

import logging
import os
import sys
from typing import Any, Mapping, Optional

from api_config.logger import set_config_logger
from api_config.utils.environment_utils import log_environment_variables

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggingService:
    """Centralized logging service for configuration startup."""

    def __init__(
        self,
        service_name: str = "ApiConfig",
        level: int = logging.INFO,
        install_as_config_logger: bool = True,
    ):
        self.service_name = service_name
        self.level = level
        self.logger = self._setup_logger()

        if install_as_config_logger:
            set_config_logger(self.logger)

    def _setup_logger(self) -> logging.Logger:
        """Setup logging with console output."""
        logger = logging.getLogger(self.service_name)
        logger.setLevel(self.level)

        if not logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.level)
            console_handler.setFormatter(
                logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
            )
            logger.addHandler(console_handler)

        return logger

    def info(self, message: str) -> None:
        """Log info message."""
        self.logger.info(message)

    def error(self, message: str) -> None:
        """Log error message."""
        self.logger.error(message)

    def warning(self, message: str) -> None:
        """Log warning message."""
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        """Log debug message."""
        self.logger.debug(message)

    def log_config_summary(self, summary: Mapping[str, Any]) -> None:
        """Log a configuration summary, one key per line."""
        self.info("=== CONFIGURATION ===")
        for key, value in summary.items():
            self.info(f"{key}: {value}")

    def log_environment_info(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Log configuration-related environment variables, secrets masked."""
        log_environment_variables(self.logger, os.environ if environ is None else environ)

    def flush(self) -> None:
        """Force flush all log handlers."""
        for handler in self.logger.handlers:
            handler.flush()
