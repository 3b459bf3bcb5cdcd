"""Client configuration for M2X."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import voluptuous as vol

from .const import (
    API_VERSION,
    BASE_URL,
    CONF_API_KEY,
    CONF_API_VERSION,
    CONF_BASE_URL,
    CONF_TIMEOUT,
    CONF_USER_AGENT,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
)
from .core.exceptions import ConfigException

_LOGGER = logging.getLogger(__name__)


def _strip(value: Any) -> str:
    return str(value).strip()


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_API_KEY): vol.Any(None, vol.All(_strip, vol.Length(min=1))),
        vol.Optional(CONF_BASE_URL, default=BASE_URL): vol.All(_strip, vol.Url()),
        vol.Optional(CONF_API_VERSION, default=API_VERSION): vol.All(_strip, vol.Length(min=1)),
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0, min_included=False)
        ),
        vol.Optional(CONF_USER_AGENT, default=DEFAULT_HEADERS["User-Agent"]): vol.All(
            _strip, vol.Length(min=1)
        ),
    }
)


@dataclass(frozen=True)
class ClientConfig:
    """Validated settings for the HTTP transport."""

    api_key: Optional[str] = None
    base_url: str = BASE_URL
    api_version: str = API_VERSION
    timeout: float = float(DEFAULT_TIMEOUT)
    user_agent: str = DEFAULT_HEADERS["User-Agent"]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """Validate a configuration mapping.

        Raises:
            ConfigException: If a value is invalid or a key is unknown
        """
        try:
            validated: Dict[str, Any] = CONFIG_SCHEMA(dict(data))
        except vol.Invalid as exc:
            _LOGGER.error("Invalid M2X configuration: %s", exc)
            raise ConfigException(f"Invalid configuration: {exc}") from exc
        return cls(
            api_key=validated.get(CONF_API_KEY),
            base_url=validated[CONF_BASE_URL],
            api_version=validated[CONF_API_VERSION],
            timeout=validated[CONF_TIMEOUT],
            user_agent=validated[CONF_USER_AGENT],
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "ClientConfig":
        """Build a configuration from M2X_* environment variables.

        Explicit keyword overrides take precedence over the environment.
        """
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}
        for env_name, conf_key in (
            (ENV_API_KEY, CONF_API_KEY),
            (ENV_BASE_URL, CONF_BASE_URL),
            (ENV_TIMEOUT, CONF_TIMEOUT),
        ):
            if environ.get(env_name):
                data[conf_key] = environ[env_name]
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_dict(data)
