"""MaxMind integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class MaxMindSettings(IntegrationSettings):
    """MaxMind GeoIP2 City database configuration.

    Environment Variables:
        GEOIP2_CITY_DATABASE_PATH: Path to the GeoIP2/GeoLite2 City database
            file. Relative paths are resolved against APP_ROOT_DIR.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        db_path = settings.maxmind.GEOIP2_CITY_DATABASE_PATH
        ```
    """

    GEOIP2_CITY_DATABASE_PATH: str = Field(
        default="", alias="GEOIP2_CITY_DATABASE_PATH"
    )
