"""
Environment utility functions for masking and logging configuration values.
"""

from typing import Mapping, Optional
from urllib.parse import urlsplit

SENSITIVE_VARS = ["DB_PASSWORD", "APP_KEY", "AUTH_SECRET", "DATABASE_URL"]
LOGGED_PREFIXES = ("APP_", "DB_", "DATABASE_", "SSL_")


def mask_sensitive_value(value: str, mask_char: str = "*") -> str:
    """Mask sensitive values for logging."""
    if not value or len(value) <= 4:
        return mask_char * len(value) if value else ""
    return value[:2] + mask_char * (len(value) - 4) + value[-2:]


def mask_connection_string(
    connection_string: str, password: Optional[str] = None, mask_char: str = "*"
) -> str:
    """
    Replace the password of a rendered connection string with a mask.

    Pass the DSN's own ``password`` when it is known: a decoded password may
    hold ``/``, ``?`` or ``#`` and then cannot be recovered by URL parsing.
    """
    if password is None:
        try:
            password = urlsplit(connection_string).password
        except ValueError:
            return connection_string
    if not password:
        return connection_string

    marker = f":{password}@"
    if marker not in connection_string:
        return connection_string
    return connection_string.replace(marker, f":{mask_char * 3}@", 1)


def log_environment_variables(
    logger, environ: Mapping[str, str], sensitive_vars: Optional[list] = None
) -> None:
    """Log configuration-related environment variables for debugging."""
    if sensitive_vars is None:
        sensitive_vars = SENSITIVE_VARS

    for var in sorted(environ):
        if var.startswith(LOGGED_PREFIXES):
            value = environ[var]
            if var in sensitive_vars:
                masked = mask_sensitive_value(value)
                logger.info(f"Environment variable {var}: {masked}")
            else:
                logger.info(f"Environment variable {var}: {value}")
