"""Client locator package - client IP resolution and subdivision lookup.

The HTTP routes live in ``packages.client_locator.routes`` and are mounted
by ``api.v1.router``.
"""

from packages.client_locator.headers import FORWARDING_HEADERS, resolve_client_ip
from packages.client_locator.locator import ClientLocator

__all__ = [
    "ClientLocator",
    "FORWARDING_HEADERS",
    "resolve_client_ip",
]
