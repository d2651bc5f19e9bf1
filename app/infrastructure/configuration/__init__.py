"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the client
locator using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    db_path = settings.maxmind.GEOIP2_CITY_DATABASE_PATH
    app_root = settings.server.APP_ROOT_DIR
    ```
"""

from infrastructure.configuration.settings import Settings

__all__ = ["Settings"]
