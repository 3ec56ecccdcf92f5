"""
Configuration error types.
"""

from typing import Optional

BAD_REQUEST = "bad_request"
INTERNAL_SERVER_ERROR = "internal_server_error"


class ConfigurationError(Exception):
    """Configuration error exception"""

    error_type = INTERNAL_SERVER_ERROR
    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        """Underlying lower-level failure, if any."""
        return self.__cause__

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"{self.message}: {self.__cause__}"
        return self.message


class BadRequestError(ConfigurationError):
    """A required application-level key is missing."""

    error_type = BAD_REQUEST
    status_code = 400


class InternalServerError(ConfigurationError):
    """Misconfiguration of the service itself."""

    pass


class RootPathNotFoundError(InternalServerError):
    """No project root containing the marker file was found."""

    pass
