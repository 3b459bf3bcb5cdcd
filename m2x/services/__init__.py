"""Resource clients for the M2X API.

- Devices: devices, streams, triggers and device-scoped keys
- Keys: API key management
"""

from .devices import Devices
from .keys import Keys

__all__ = [
    "Devices",
    "Keys",
]
