"""Response model for the M2X client."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ApiResponse:
    """Outcome of a successful API request."""

    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    json: Optional[Any] = None
    raw: str = ""

    @property
    def success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def no_content(self) -> bool:
        """True for 204 responses and empty bodies (e.g. a device with no location)."""
        return self.status == 204 or not self.raw.strip()
