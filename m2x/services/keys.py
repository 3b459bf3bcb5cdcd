"""Wrapper for the M2X Keys API.

https://m2x.att.com/developer/documentation/v2/keys
"""

import logging
from typing import Any, Mapping, Optional

from ..const import JSON_HEADERS, URL_KEY, URL_KEY_REGENERATE, URL_KEYS
from ..core.api_client import M2XHttpApiClient
from ..core.url import url
from ..models import ApiResponse

_LOGGER = logging.getLogger(__name__)


class Keys:
    """API key management.

    Create and update bodies carry a ``permissions`` array, so they are sent
    as JSON.
    """

    __slots__ = ("client",)

    def __init__(self, client: M2XHttpApiClient) -> None:
        self.client = client

    async def list(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """Keys of the account, optionally filtered by ``device``/``stream``."""
        return await self.client.get(URL_KEYS, qs=dict(params or {}))

    async def create(self, params: Mapping[str, Any]) -> ApiResponse:
        """Create a new key.

        Args:
            params: Key attributes (``name``, ``permissions``, and optionally
                ``device``, ``stream``, ``expires_at``, ``origin``)

        Returns:
            The created key, including its token
        """
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Creating key scoped to device=%s stream=%s", params.get("device"), params.get("stream"))
        return await self.client.post(URL_KEYS, params=dict(params), headers=dict(JSON_HEADERS))

    async def view(self, key: str) -> ApiResponse:
        return await self.client.get(url(URL_KEY, key))

    async def update(self, key: str, params: Mapping[str, Any]) -> ApiResponse:
        return await self.client.put(url(URL_KEY, key), params=dict(params), headers=dict(JSON_HEADERS))

    async def regenerate(self, key: str) -> ApiResponse:
        """Replace the key token; the old token stops working immediately."""
        return await self.client.post(url(URL_KEY_REGENERATE, key))

    async def delete(self, key: str) -> ApiResponse:
        return await self.client.delete(url(URL_KEY, key))
