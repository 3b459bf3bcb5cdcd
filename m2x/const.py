"""Constants for the M2X client."""

import logging
from typing import Final

DOMAIN: Final = "m2x"
VERSION: Final = "2.0.0"
_LOGGER = logging.getLogger(__package__)

# --- HTTP API Constants ---
BASE_URL: Final = "https://api-m2x.att.com"
API_VERSION: Final = "v2"
API_KEY_HEADER: Final = "X-M2X-KEY"

CONTENT_TYPE_JSON: Final = "application/json"
CONTENT_TYPE_FORM: Final = "application/x-www-form-urlencoded"
JSON_HEADERS: Final = {"Content-Type": CONTENT_TYPE_JSON}

DEFAULT_HEADERS: Final = {
    "Accept": "application/json",
    "User-Agent": f"pym2x/{VERSION}",
}

# --- Device endpoints ---
URL_DEVICES: Final = "/devices"
URL_DEVICES_CATALOG: Final = "/devices/catalog"
URL_DEVICES_GROUPS: Final = "/devices/groups"
URL_DEVICE: Final = "/devices/{0}"
URL_DEVICE_LOCATION: Final = "/devices/{0}/location"
URL_DEVICE_STREAMS: Final = "/devices/{0}/streams"
URL_DEVICE_STREAM: Final = "/devices/{0}/streams/{1}"
URL_DEVICE_STREAM_VALUE: Final = "/devices/{0}/streams/{1}/value"
URL_DEVICE_STREAM_VALUES: Final = "/devices/{0}/streams/{1}/values"
URL_DEVICE_STREAM_SAMPLING: Final = "/devices/{0}/streams/{1}/sampling"
URL_DEVICE_STREAM_STATS: Final = "/devices/{0}/streams/{1}/stats"
URL_DEVICE_UPDATES: Final = "/devices/{0}/updates"
URL_DEVICE_TRIGGERS: Final = "/devices/{0}/triggers"
URL_DEVICE_TRIGGER: Final = "/devices/{0}/triggers/{1}"
URL_DEVICE_LOG: Final = "/devices/{0}/log"

# --- Key endpoints ---
URL_KEYS: Final = "/keys"
URL_KEY: Final = "/keys/{0}"
URL_KEY_REGENERATE: Final = "/keys/{0}/regenerate"

URL_STATUS: Final = "/status"

# --- Configuration Keys ---
CONF_API_KEY: Final = "api_key"
CONF_BASE_URL: Final = "base_url"
CONF_API_VERSION: Final = "api_version"
CONF_TIMEOUT: Final = "timeout"
CONF_USER_AGENT: Final = "user_agent"

ENV_API_KEY: Final = "M2X_API_KEY"
ENV_BASE_URL: Final = "M2X_BASE_URL"
ENV_TIMEOUT: Final = "M2X_TIMEOUT"

# --- Timeout ---
DEFAULT_TIMEOUT: Final = 30
