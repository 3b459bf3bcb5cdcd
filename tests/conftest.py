"""Pytest configuration and fixtures for M2X client tests."""

from __future__ import annotations

from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from m2x.core.api_client import M2XHttpApiClient
from m2x.models import ApiResponse
from m2x.services import Devices, Keys

TEST_API_KEY = "test_api_key_12345"
TEST_DEVICE_ID = "188a0afb3a2b6f9bd6fdc1d2d5ca2d7e"


def make_response(status: int = 200, text: str = "{}", headers: Optional[Dict[str, str]] = None) -> MagicMock:
    """Fake aiohttp response usable inside ``async with session.request(...)``."""
    response = MagicMock()
    response.status = status
    response.reason = "Reason"
    response.headers = headers or {"Content-Type": "application/json"}
    response.text = AsyncMock(return_value=text)
    return response


def make_session(response: Any) -> MagicMock:
    """Fake aiohttp session whose request() yields the given response."""
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    session = MagicMock()
    session.request = MagicMock(return_value=context)
    return session


@pytest.fixture
def device_id() -> str:
    return TEST_DEVICE_ID


@pytest.fixture
def mock_api_client():
    """Mock HTTP transport recording every outbound request."""
    client = MagicMock(spec=M2XHttpApiClient)
    ok = ApiResponse(status=200, json={}, raw="{}")
    client.get = AsyncMock(return_value=ok)
    client.post = AsyncMock(return_value=ok)
    client.put = AsyncMock(return_value=ok)
    client.delete = AsyncMock(return_value=ok)
    return client


@pytest.fixture
def mock_keys_api():
    """Mock key management client."""
    keys = MagicMock(spec=Keys)
    keys.create = AsyncMock(return_value=ApiResponse(status=201, json={"key": "new"}, raw='{"key": "new"}'))
    keys.update = AsyncMock(return_value=ApiResponse(status=204))
    return keys


@pytest.fixture
def devices(mock_api_client, mock_keys_api) -> Devices:
    return Devices(mock_api_client, mock_keys_api)


@pytest.fixture
def api_client_factory():
    """Build a real transport on top of a fake session."""

    def _factory(status: int = 200, text: str = "{}", api_key: Optional[str] = TEST_API_KEY, **kwargs: Any):
        response = make_response(status, text)
        session = make_session(response)
        return M2XHttpApiClient(session, api_key=api_key, **kwargs), session

    return _factory
