"""HTTP API client for the M2X platform."""

import asyncio
import json
import logging
from typing import Any, Dict, Mapping, Optional

import aiohttp
from aiohttp.client import ClientTimeout

from ..const import (
    API_KEY_HEADER,
    API_VERSION,
    BASE_URL,
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    URL_STATUS,
)
from ..models.response import ApiResponse
from .exceptions import ApiException, AuthException
from .url import encode_form, encode_query

_LOGGER = logging.getLogger(__name__)


def _mask(key: Optional[str]) -> str:
    if not key:
        return "<none>"
    return (key[:6] + "...") if len(key) > 6 else "***"


class M2XHttpApiClient:
    """HTTP transport for the M2X API.

    Issues one request per call, adds the API key header, encodes the query
    string and body, and turns HTTP failures into exceptions. It keeps no
    per-request state, so calls may run concurrently on the same instance.
    """

    __slots__ = ("_session", "_api_key", "_base_url", "_api_version", "_timeout", "_headers")

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: Optional[str] = None,
        base_url: str = BASE_URL,
        api_version: str = API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: Optional[str] = None,
    ) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp client session for HTTP requests
            api_key: M2X API key sent as the X-M2X-KEY header
            base_url: Scheme and host of the API
            api_version: Version prefix for every path
            timeout: Total request timeout in seconds
            user_agent: Override for the default User-Agent header
        """
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version.strip("/")
        self._timeout = ClientTimeout(total=timeout)
        self._headers = dict(DEFAULT_HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    def set_api_key(self, api_key: Optional[str]) -> None:
        """Set the API key used for authenticated requests.

        Args:
            api_key: M2X API key, or None to clear it
        """
        self._api_key = api_key
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("API key %s.", "set" if api_key else "cleared")

    def build_url(self, path: str) -> str:
        """Return the absolute URL for an API path."""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}/{self._api_version}{path}"

    async def get(self, path: str, qs=None, params=None, headers=None, requires_auth: bool = True) -> ApiResponse:
        return await self._request("GET", path, qs, params, headers, requires_auth)

    async def post(self, path: str, qs=None, params=None, headers=None, requires_auth: bool = True) -> ApiResponse:
        return await self._request("POST", path, qs, params, headers, requires_auth)

    async def put(self, path: str, qs=None, params=None, headers=None, requires_auth: bool = True) -> ApiResponse:
        return await self._request("PUT", path, qs, params, headers, requires_auth)

    async def delete(self, path: str, qs=None, params=None, headers=None, requires_auth: bool = True) -> ApiResponse:
        return await self._request("DELETE", path, qs, params, headers, requires_auth)

    async def status(self) -> ApiResponse:
        """Return the API status (no authentication needed)."""
        return await self.get(URL_STATUS, requires_auth=False)

    def _encode_body(self, params: Optional[Mapping[str, Any]], headers: Dict[str, str]) -> Any:
        if params is None:
            return None
        content_type = headers.setdefault("Content-Type", CONTENT_TYPE_FORM)
        if content_type.startswith(CONTENT_TYPE_JSON):
            return json.dumps(params)
        return encode_form(params)

    async def _request(
        self,
        method: str,
        path: str,
        qs: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
        requires_auth: bool = True,
    ) -> ApiResponse:
        """Make HTTP request to API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (relative to the version prefix) or absolute URL
            qs: Query string parameters
            params: Request body parameters
            extra_headers: Additional headers, applied last
            requires_auth: Whether the API key header is required

        Returns:
            The parsed response; ``json`` is None for empty bodies

        Raises:
            AuthException: If no API key is set or the API rejects it
            ApiException: If the request fails for any other reason
        """
        url = self.build_url(path)

        headers = dict(self._headers)
        if requires_auth:
            if self._api_key:
                headers[API_KEY_HEADER] = self._api_key
            else:
                _LOGGER.error("API key needed for %s %s", method, path)
                raise AuthException("API key required")
        if extra_headers:
            headers.update(extra_headers)

        data = self._encode_body(params, headers)
        query = encode_query(qs)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("HTTP %s %s qs=%s key=%s", method, url, query, _mask(headers.get(API_KEY_HEADER)))

        try:
            async with self._session.request(
                method, url, headers=headers, params=query or None, data=data, timeout=self._timeout
            ) as response:
                resp_text = await response.text()
                if _LOGGER.isEnabledFor(logging.DEBUG):
                    _LOGGER.debug("HTTP %s response: %s", url, response.status)

                body: Any = None
                if resp_text.strip():
                    try:
                        body = json.loads(resp_text)
                    except ValueError as json_err:
                        if response.status < 400:
                            _LOGGER.error("Invalid JSON from %s: %s", url, resp_text[:300])
                            raise ApiException(
                                f"Invalid JSON: {resp_text[:300]}", response.status, resp_text
                            ) from json_err
                        body = resp_text

                if response.status >= 400:
                    message = body.get("message") if isinstance(body, dict) else None
                    _LOGGER.error("HTTP error %s %s: %s", method, url, response.status)
                    exc_class = AuthException if response.status in (401, 403) else ApiException
                    raise exc_class(
                        f"HTTP error {response.status}: {message or response.reason}",
                        response.status,
                        body,
                    )

                return ApiResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    json=body,
                    raw=resp_text,
                )

        except ApiException:
            raise
        except asyncio.TimeoutError as exc:
            _LOGGER.error("Request timeout %s %s", method, url)
            raise ApiException(f"Request timeout: {method} {url}") from exc
        except aiohttp.ClientError as exc:
            _LOGGER.error("Client error %s %s: %s: %s", method, url, type(exc).__name__, exc)
            raise ApiException(f"Request failed: {exc}") from exc
