"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.services.providers import get_settings, get_client_locator
from packages.client_locator.locator import ClientLocator

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Client locator dependency - shared instance backed by the GeoIP2 database
ClientLocatorDep = Annotated[ClientLocator, Depends(get_client_locator)]

__all__ = [
    "SettingsDep",
    "ClientLocatorDep",
]
