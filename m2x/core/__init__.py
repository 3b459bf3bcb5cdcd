"""Core functionality of the M2X client.

This package contains:
- HTTP transport for the M2X API
- URL and payload encoding helpers
- Custom exceptions
"""

from .api_client import M2XHttpApiClient
from .exceptions import (
    ApiException,
    AuthException,
    ConfigException,
    InvalidArgumentException,
    M2XException,
)

__all__ = [
    "M2XHttpApiClient",
    "M2XException",
    "ApiException",
    "AuthException",
    "ConfigException",
    "InvalidArgumentException",
]
