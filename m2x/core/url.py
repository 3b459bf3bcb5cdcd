"""URL and payload encoding helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

from .exceptions import InvalidArgumentException


def require_id(value: Any, what: str) -> Any:
    """Return value, or raise if it is None or an empty string."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentException(f"Missing identifier: {what}")
    return value


def url(template: str, *args: Any) -> str:
    """Substitute identifiers into a positional path template.

    Every value is percent-encoded as a single path segment, so reserved
    characters such as ``/``, ``?`` or spaces cannot change the shape of
    the path.

    Args:
        template: Path template with ``{0}``, ``{1}``... placeholders
        *args: Identifiers, in placeholder order

    Returns:
        The resolved path

    Raises:
        InvalidArgumentException: If an identifier is None or empty
    """
    segments = [
        quote(str(require_id(value, f"#{index} in {template}")), safe="")
        for index, value in enumerate(args)
    ]
    return template.format(*segments)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def encode_query(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Stringify query parameters, dropping None values."""
    if not params:
        return {}
    return {key: _query_value(value) for key, value in params.items() if value is not None}


def _flatten(prefix: str, value: Any, out: List[Tuple[str, str]]) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, out)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, out)
    elif value is None:
        out.append((prefix, ""))
    else:
        out.append((prefix, _query_value(value)))


def encode_form(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """Form-encode a body, using bracket notation for nested data.

    ``{"values": [{"value": 1}]}`` becomes ``[("values[0][value]", "1")]``.
    """
    out: List[Tuple[str, str]] = []
    if not params:
        return out
    for key, value in params.items():
        _flatten(str(key), value, out)
    return out
