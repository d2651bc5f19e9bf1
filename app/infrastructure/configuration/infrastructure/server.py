"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        APP_ROOT_DIR: Application root directory; relative file paths in
            other settings are resolved against it (default: ".")
        RATE_LIMIT: slowapi rate limit applied to the lookup endpoints
            (default: "100/minute")

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        root = settings.server.APP_ROOT_DIR
        ```
    """

    APP_ROOT_DIR: str = Field(default=".", alias="APP_ROOT_DIR")
    RATE_LIMIT: str = Field(default="100/minute", alias="RATE_LIMIT")
