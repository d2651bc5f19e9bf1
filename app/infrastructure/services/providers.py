"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

import threading
from functools import lru_cache
from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from packages.client_locator.locator import ClientLocator

logger = get_module_logger()


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


# Process-wide client locator cell
_client_locator: Optional[ClientLocator] = None
_client_locator_error: Optional[Exception] = None
_client_locator_lock = threading.Lock()


def get_client_locator() -> ClientLocator:
    """
    Get the process-wide ClientLocator, opening the GeoIP2 database on first use.

    Thread-safe: concurrent first calls open the database exactly once. If
    opening fails, the failure is recorded and re-raised to every caller;
    the open is never retried.

    Returns:
        ClientLocator: The shared locator instance.

    Raises:
        DatabaseInitializationError: If the configured database could not be
            opened (on this or any earlier call).

    Usage:
        @router.get("/subdivision")
        def subdivision(ip_address: str, locator: ClientLocatorDep):
            result = locator.subdivision_code_for(ip_address)
    """
    global _client_locator, _client_locator_error

    if _client_locator is None and _client_locator_error is None:
        with _client_locator_lock:
            # Double-check locking pattern
            if _client_locator is None and _client_locator_error is None:
                try:
                    _client_locator = ClientLocator.from_settings(get_settings())
                    logger.info("client_locator_initialized")
                except Exception as e:
                    logger.error("client_locator_initialization_failed", error=str(e))
                    _client_locator_error = e

    if _client_locator_error is not None:
        raise _client_locator_error
    return _client_locator
