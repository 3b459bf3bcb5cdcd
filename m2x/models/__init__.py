"""Data models for the M2X client."""

from .endpoint import Endpoint, Placement
from .response import ApiResponse

__all__ = [
    "ApiResponse",
    "Endpoint",
    "Placement",
]
