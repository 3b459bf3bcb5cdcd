"""Async Python client for the AT&T M2X device API.

Example:

    async with M2X(api_key="...") as m2x:
        device = await m2x.devices.create({"name": "thermostat", "visibility": "private"})
        await m2x.devices.update_stream(device.json["id"], "temperature", {"unit": {"label": "celsius"}})
        values = await m2x.devices.stream_values(device.json["id"], "temperature", {"limit": 10})
"""

from __future__ import annotations

from typing import Any, Optional

import aiohttp

from .config import ClientConfig
from .const import _LOGGER, VERSION
from .core.api_client import M2XHttpApiClient
from .core.exceptions import (
    ApiException,
    AuthException,
    ConfigException,
    InvalidArgumentException,
    M2XException,
)
from .models import ApiResponse
from .services import Devices, Keys

__version__ = VERSION

__all__ = [
    "M2X",
    "ClientConfig",
    "M2XHttpApiClient",
    "Devices",
    "Keys",
    "ApiResponse",
    "M2XException",
    "ApiException",
    "AuthException",
    "ConfigException",
    "InvalidArgumentException",
]


class M2X:
    """Entry point wiring the transport to the resource clients.

    When no session is passed, one is created on first use and closed by
    ``close()`` (or on leaving ``async with``). A caller-supplied session is
    never closed here.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
        config: Optional[ClientConfig] = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = ClientConfig.from_dict({"api_key": api_key, **options})
        self.config = config
        self._session = session
        self._owns_session = session is None
        self._client: Optional[M2XHttpApiClient] = None
        self._devices: Optional[Devices] = None
        self._keys: Optional[Keys] = None

    @classmethod
    def from_env(cls, session: Optional[aiohttp.ClientSession] = None, **overrides: Any) -> "M2X":
        return cls(session=session, config=ClientConfig.from_env(**overrides))

    @property
    def client(self) -> M2XHttpApiClient:
        if self._client is None:
            if self._session is None:
                _LOGGER.debug("Creating aiohttp session for %s", self.config.base_url)
                self._session = aiohttp.ClientSession()
            self._client = M2XHttpApiClient(
                self._session,
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                api_version=self.config.api_version,
                timeout=self.config.timeout,
                user_agent=self.config.user_agent,
            )
        return self._client

    @property
    def keys(self) -> Keys:
        if self._keys is None:
            self._keys = Keys(self.client)
        return self._keys

    @property
    def devices(self) -> Devices:
        if self._devices is None:
            self._devices = Devices(self.client, self.keys)
        return self._devices

    async def status(self) -> ApiResponse:
        """API health check."""
        return await self.client.status()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._client = self._devices = self._keys = None

    async def __aenter__(self) -> "M2X":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
