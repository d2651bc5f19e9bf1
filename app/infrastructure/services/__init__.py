"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    ClientLocatorDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_client_locator,
)

__all__ = [
    "SettingsDep",
    "ClientLocatorDep",
    "get_settings",
    "get_client_locator",
]
