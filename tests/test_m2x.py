"""Tests for the M2X entry point."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from m2x import M2X, ClientConfig, ConfigException, M2XHttpApiClient
from m2x.services import Devices, Keys


def test_wires_services():
    session = MagicMock()
    m2x = M2X(api_key="abc", session=session)

    assert isinstance(m2x.devices, Devices)
    assert isinstance(m2x.keys, Keys)
    assert m2x.devices.keys_api is m2x.keys
    assert m2x.devices.client is m2x.client
    assert m2x.client.api_key == "abc"


def test_invalid_options():
    with pytest.raises(ConfigException):
        M2X(api_key="abc", timeout=-1)


def test_from_env():
    with patch.dict("os.environ", {"M2X_API_KEY": "env-key"}, clear=True):
        m2x = M2X.from_env(session=MagicMock())
    assert m2x.config == ClientConfig(api_key="env-key")


@pytest.mark.asyncio
async def test_caller_session_is_not_closed():
    session = MagicMock()
    session.close = AsyncMock()

    async with M2X(api_key="abc", session=session) as m2x:
        assert m2x.client is not None

    session.close.assert_not_awaited()


@pytest.mark.asyncio
async def test_owned_session_is_closed():
    with patch("m2x.aiohttp.ClientSession") as session_class:
        session = session_class.return_value
        session.close = AsyncMock()

        async with M2X(api_key="abc") as m2x:
            assert m2x.devices is not None

        session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_status_delegates_to_client():
    m2x = M2X(session=MagicMock())
    with patch.object(M2XHttpApiClient, "status", new_callable=AsyncMock) as mock_status:
        await m2x.status()
    mock_status.assert_awaited_once()
