"""Client locator: client IP resolution and subdivision lookup."""

import ipaddress
from typing import Mapping

from geoip2.errors import AddressNotFoundError, GeoIP2Error
from maxminddb.errors import InvalidDatabaseError

from infrastructure.clients.maxmind import MaxMindDatabase, resolve_database_path
from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from packages.client_locator.headers import resolve_client_ip

logger = get_module_logger()

HEALTHCHECK_IP = "8.8.8.8"


class ClientLocator:
    """Resolves client IPs and maps IPs to subdivision ISO codes.

    Owns the MaxMindDatabase for the lifetime of the process. Obtain the
    shared instance through ``infrastructure.services.get_client_locator``.

    Args:
        database: Opened GeoIP2 City database
    """

    def __init__(self, database: MaxMindDatabase) -> None:
        self._database = database
        self._logger = logger.bind(db_path=database.db_path)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientLocator":
        """Open the configured database and build a locator around it.

        Raises:
            DatabaseInitializationError: If the database cannot be opened.
        """
        db_path = resolve_database_path(
            settings.maxmind.GEOIP2_CITY_DATABASE_PATH,
            settings.server.APP_ROOT_DIR,
        )
        return cls(MaxMindDatabase(db_path))

    def resolve_client_ip(self, headers: Mapping[str, str], remote_addr: str) -> str:
        """See ``packages.client_locator.headers.resolve_client_ip``."""
        return resolve_client_ip(headers, remote_addr)

    def subdivision_code_for(self, ip_address: str) -> OperationResult:
        """Return the ISO code of the most specific subdivision for an IP.

        The ISO code is a one or two character code for the state, province
        or region, depending on the country.

        Args:
            ip_address: IPv4 or IPv6 address text

        Returns:
            OperationResult with one of:
            - SUCCESS: data is the ISO code, or None when the record carries
              no subdivision
            - INVALID_ADDRESS: the text is not an IP address
            - NOT_FOUND: the address is not in the database
            - IO_FAILURE: the database could not be read
        """
        log = self._logger.bind(ip_address=ip_address)

        try:
            address = ipaddress.ip_address(ip_address)
        except ValueError:
            log.warning("invalid_ip_format")
            return OperationResult.invalid_address(
                message=f"Invalid IP address format: {ip_address}",
            )

        try:
            response = self._database.city(address)
        except AddressNotFoundError:
            log.info("ip_not_found")
            return OperationResult.not_found(
                message=f"IP address not found in database: {ip_address}",
            )
        except (OSError, ValueError, InvalidDatabaseError, GeoIP2Error) as e:
            log.error("database_read_failed", error=str(e))
            return OperationResult.io_failure(
                message=f"GeoIP2 database error: {e}",
            )

        subdivision_code = response.subdivisions.most_specific.iso_code
        log.debug("subdivision_resolved", subdivision_code=subdivision_code)
        return OperationResult.success(
            data=subdivision_code, message="Subdivision resolved"
        )

    def healthcheck(self) -> OperationResult:
        """Check that the database is readable.

        Probes HEALTHCHECK_IP; a probe address missing from the database still
        counts as healthy.

        Returns:
            OperationResult with database metadata or IO_FAILURE
        """
        try:
            metadata = self._database.metadata()
            self._database.city(ipaddress.ip_address(HEALTHCHECK_IP))
        except AddressNotFoundError:
            pass
        except (OSError, ValueError, InvalidDatabaseError) as e:
            self._logger.error("healthcheck_failed", error=str(e))
            return OperationResult.io_failure(
                message=f"GeoIP2 healthcheck failed: {e}",
                error_code="HEALTHCHECK_FAILED",
            )

        return OperationResult.success(
            data={
                "status": "healthy",
                "database_type": metadata.database_type,
                "build_epoch": metadata.build_epoch,
                "ip_version": metadata.ip_version,
            },
            message="GeoIP2 database is accessible",
        )

    def close(self) -> None:
        self._database.close()
