"""Wrapper for the M2X Device API.

https://m2x.att.com/developer/documentation/v2/device
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..const import (
    JSON_HEADERS,
    URL_DEVICE,
    URL_DEVICE_LOCATION,
    URL_DEVICE_LOG,
    URL_DEVICE_STREAM,
    URL_DEVICE_STREAM_SAMPLING,
    URL_DEVICE_STREAM_STATS,
    URL_DEVICE_STREAM_VALUE,
    URL_DEVICE_STREAM_VALUES,
    URL_DEVICE_STREAMS,
    URL_DEVICE_TRIGGER,
    URL_DEVICE_TRIGGERS,
    URL_DEVICE_UPDATES,
    URL_DEVICES,
    URL_DEVICES_CATALOG,
    URL_DEVICES_GROUPS,
    URL_KEYS,
)
from ..core.api_client import M2XHttpApiClient
from ..core.url import require_id
from ..models import ApiResponse, Endpoint, Placement
from .keys import Keys

_LOGGER = logging.getLogger(__name__)

GET, POST, PUT, DELETE = "GET", "POST", "PUT", "DELETE"
QUERY, BODY = Placement.QUERY, Placement.BODY

ENDPOINTS: Dict[str, Endpoint] = {
    "catalog": Endpoint(GET, URL_DEVICES_CATALOG, QUERY),
    "search": Endpoint(GET, URL_DEVICES, QUERY),
    "groups": Endpoint(GET, URL_DEVICES_GROUPS),
    "create": Endpoint(POST, URL_DEVICES, BODY),
    "update": Endpoint(PUT, URL_DEVICE, BODY, json_body=True),
    "view": Endpoint(GET, URL_DEVICE),
    "location": Endpoint(GET, URL_DEVICE_LOCATION),
    "update_location": Endpoint(PUT, URL_DEVICE_LOCATION, BODY),
    "streams": Endpoint(GET, URL_DEVICE_STREAMS),
    "update_stream": Endpoint(PUT, URL_DEVICE_STREAM, BODY),
    "set_stream_value": Endpoint(PUT, URL_DEVICE_STREAM_VALUE, BODY),
    "stream": Endpoint(GET, URL_DEVICE_STREAM),
    "stream_values": Endpoint(GET, URL_DEVICE_STREAM_VALUES, QUERY),
    "sample_stream_values": Endpoint(GET, URL_DEVICE_STREAM_SAMPLING, QUERY),
    "stream_stats": Endpoint(GET, URL_DEVICE_STREAM_STATS, QUERY),
    "post_values": Endpoint(POST, URL_DEVICE_STREAM_VALUES, BODY),
    "delete_stream_values": Endpoint(DELETE, URL_DEVICE_STREAM_VALUES, BODY),
    "delete_stream": Endpoint(DELETE, URL_DEVICE_STREAM),
    "post_multiple": Endpoint(POST, URL_DEVICE_UPDATES, BODY, json_body=True),
    "triggers": Endpoint(GET, URL_DEVICE_TRIGGERS),
    "create_trigger": Endpoint(POST, URL_DEVICE_TRIGGERS, BODY),
    "trigger": Endpoint(GET, URL_DEVICE_TRIGGER),
    "update_trigger": Endpoint(PUT, URL_DEVICE_TRIGGER, BODY),
    "test_trigger": Endpoint(POST, URL_DEVICE_TRIGGER),
    "delete_trigger": Endpoint(DELETE, URL_DEVICE_TRIGGER),
    "log": Endpoint(GET, URL_DEVICE_LOG),
    "delete_device": Endpoint(DELETE, URL_DEVICE),
    "keys": Endpoint(GET, URL_KEYS, QUERY),
}

# Catalog browsing is open to anonymous users.
PUBLIC_OPERATIONS = frozenset({"catalog"})


class Devices:
    """Device, stream and trigger operations of the M2X API.

    Every coroutine issues exactly one request and returns its
    ``ApiResponse``; transport errors propagate unchanged.
    """

    __slots__ = ("client", "keys_api")

    def __init__(self, client: M2XHttpApiClient, keys_api: Keys) -> None:
        self.client = client
        self.keys_api = keys_api

    async def _call(
        self,
        operation: str,
        *ids: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ApiResponse:
        endpoint = ENDPOINTS[operation]
        path = endpoint.path_for(*ids)
        if endpoint.placement is Placement.NONE:
            params = None
        else:
            params = dict(params or {})

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Device operation %s -> %s %s", operation, endpoint.method, path)

        send = getattr(self.client, endpoint.method.lower())
        return await send(
            path,
            qs=params if endpoint.placement is Placement.QUERY else None,
            params=params if endpoint.placement is Placement.BODY else None,
            headers=dict(JSON_HEADERS) if endpoint.json_body else None,
            requires_auth=operation not in PUBLIC_OPERATIONS,
        )

    # --- Devices ---------------------------------------------------------

    async def catalog(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """List/search the catalog of public devices.

        Unauthenticated users may search devices other users marked as
        public, and read their metadata, location, streams and values.
        """
        return await self._call("catalog", params=params)

    async def search(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """Devices accessible by the API key that meet the search criteria."""
        return await self._call("search", params=params)

    async def list(self) -> ApiResponse:
        """All devices accessible by the API key."""
        return await self.search({})

    async def groups(self) -> ApiResponse:
        return await self._call("groups")

    async def create(self, params: Mapping[str, Any]) -> ApiResponse:
        return await self._call("create", params=params)

    async def update(self, id: str, params: Mapping[str, Any]) -> ApiResponse:
        """Update device details; sent as JSON since metadata may be nested."""
        return await self._call("update", id, params=params)

    async def view(self, id: str) -> ApiResponse:
        return await self._call("view", id)

    async def location(self, id: str) -> ApiResponse:
        """Current location of the device.

        A device with no location answers 204: the response is still a
        success, with ``no_content`` set and ``json`` None.
        """
        return await self._call("location", id)

    async def update_location(self, id: str, params: Mapping[str, Any]) -> ApiResponse:
        return await self._call("update_location", id, params=params)

    async def log(self, id: str) -> ApiResponse:
        """Access log of the device."""
        return await self._call("log", id)

    async def delete_device(self, id: str) -> ApiResponse:
        return await self._call("delete_device", id)

    # --- Streams ---------------------------------------------------------

    async def streams(self, id: str) -> ApiResponse:
        return await self._call("streams", id)

    async def update_stream(self, id: str, name: str, params: Mapping[str, Any]) -> ApiResponse:
        """Update stream properties, creating the stream if it does not exist."""
        return await self._call("update_stream", id, name, params=params)

    async def set_stream_value(self, id: str, name: str, params: Mapping[str, Any]) -> ApiResponse:
        return await self._call("set_stream_value", id, name, params=params)

    async def stream(self, id: str, name: str) -> ApiResponse:
        return await self._call("stream", id, name)

    async def stream_values(
        self, id: str, name: str, params: Optional[Mapping[str, Any]] = None
    ) -> ApiResponse:
        """Values of a stream, most recent first."""
        return await self._call("stream_values", id, name, params=params)

    async def sample_stream_values(self, id: str, name: str, params: Mapping[str, Any]) -> ApiResponse:
        return await self._call("sample_stream_values", id, name, params=params)

    async def stream_stats(
        self, id: str, name: str, params: Optional[Mapping[str, Any]] = None
    ) -> ApiResponse:
        return await self._call("stream_stats", id, name, params=params)

    async def post_values(self, id: str, name: str, values: List[Mapping[str, Any]]) -> ApiResponse:
        """Post timestamped values to an existing stream.

        Args:
            id: Device ID
            name: Stream name
            values: List of ``{"timestamp": ..., "value": ...}`` items
        """
        return await self._call("post_values", id, name, params={"values": values})

    async def delete_stream_values(self, id: str, name: str, params: Mapping[str, Any]) -> ApiResponse:
        """Delete stream values in the ``from``/``end`` range given in params."""
        return await self._call("delete_stream_values", id, name, params=params)

    async def delete_stream(self, id: str, name: str) -> ApiResponse:
        """Delete the stream and all of its values."""
        return await self._call("delete_stream", id, name)

    async def post_multiple(self, id: str, values: Mapping[str, Any]) -> ApiResponse:
        """Post values to several streams of the device at once.

        The streams must already exist.

        Args:
            id: Device ID
            values: Mapping of stream name to a list of timestamped values
        """
        return await self._call("post_multiple", id, params={"values": values})

    # --- Triggers --------------------------------------------------------

    async def triggers(self, id: str) -> ApiResponse:
        return await self._call("triggers", id)

    async def create_trigger(self, id: str, params: Mapping[str, Any]) -> ApiResponse:
        return await self._call("create_trigger", id, params=params)

    async def trigger(self, id: str, trigger_id: str) -> ApiResponse:
        return await self._call("trigger", id, trigger_id)

    async def update_trigger(self, id: str, trigger_id: str, params: Mapping[str, Any]) -> ApiResponse:
        return await self._call("update_trigger", id, trigger_id, params=params)

    async def test_trigger(self, id: str, trigger_id: str) -> ApiResponse:
        """Fire the trigger with a fake value to exercise notification handling."""
        return await self._call("test_trigger", id, trigger_id)

    async def delete_trigger(self, id: str, trigger_id: str) -> ApiResponse:
        return await self._call("delete_trigger", id, trigger_id)

    # --- Keys ------------------------------------------------------------

    async def keys(self, id: str) -> ApiResponse:
        """API keys associated with the device."""
        return await self._call("keys", params={"device": require_id(id, "device")})

    async def create_key(self, id: str, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """Create an API key bound to the device.

        Passing ``stream`` in params restricts the key to that stream.
        """
        return await self.keys_api.create(self._scoped(id, params))

    async def update_key(
        self, id: str, key: str, params: Optional[Mapping[str, Any]] = None
    ) -> ApiResponse:
        return await self.keys_api.update(key, self._scoped(id, params))

    @staticmethod
    def _scoped(id: str, params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        require_id(id, "device")
        scoped = dict(params or {})
        # The device the key is created through always wins.
        if scoped.get("device") not in (None, id):
            _LOGGER.warning("Replacing device %s with %s in key params", scoped["device"], id)
        scoped["device"] = id
        return scoped
