"""Client IP resolution from proxy-forwarding headers."""

from typing import Mapping, Optional

# Checked in order; the first usable value wins.
FORWARDING_HEADERS = (
    "X-Forwarded-For",
    "Proxy-Client-IP",
    "WL-Proxy-Client-IP",
    "HTTP_X_FORWARDED_FOR",
    "HTTP_X_FORWARDED",
    "HTTP_X_CLUSTER_CLIENT_IP",
    "HTTP_CLIENT_IP",
    "HTTP_FORWARDED_FOR",
    "HTTP_FORWARDED",
    "HTTP_VIA",
    "REMOTE_ADDR",
    "X-Real-IP",
)

UNKNOWN = "unknown"


def _lowercase_headers(headers: Mapping[str, str]) -> dict[str, str]:
    lowered: dict[str, str] = {}
    for name, value in headers.items():
        lowered.setdefault(name.lower(), value)
    return lowered


def _is_usable(value: Optional[str]) -> bool:
    return bool(value) and value.lower() != UNKNOWN


def resolve_client_ip(headers: Mapping[str, str], remote_addr: str) -> str:
    """Return the originating client IP for a request.

    Walks FORWARDING_HEADERS in order and returns the first value that is
    neither empty nor "unknown" (any case). Header names match
    case-insensitively. Values are returned verbatim; nothing is parsed,
    trimmed or split.

    If no header qualifies, ``remote_addr`` is returned as-is, even when it
    is empty.

    Args:
        headers: Request headers (dict or Starlette Headers)
        remote_addr: Transport-level peer address

    Returns:
        The client IP address text
    """
    lowered = _lowercase_headers(headers)
    for name in FORWARDING_HEADERS:
        value = lowered.get(name.lower())
        if _is_usable(value):
            return value
    return remote_addr
