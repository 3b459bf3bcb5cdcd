"""Custom exceptions for the M2X client."""

from typing import Any, Optional


class M2XException(Exception):
    """Base exception for the M2X client."""

    pass


class ApiException(M2XException):
    """A request to the M2X API failed.

    Covers HTTP error statuses as well as network failures and timeouts,
    in which case ``status`` is None.
    """

    def __init__(self, message: str, status: Optional[int] = None, body: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class AuthException(ApiException):
    """Exception for authentication errors."""

    pass


class InvalidArgumentException(M2XException, ValueError):
    """A required identifier was missing or empty."""

    pass


class ConfigException(M2XException):
    """Exception for invalid client configuration."""

    pass
