"""MaxMind GeoIP2 City database handle.

Opens a GeoIP2/GeoLite2 City database once and answers point queries. The
binary format is handled entirely by ``geoip2``/``maxminddb``; this module
only owns the reader's lifecycle and the path resolution rules.
"""

from ipaddress import IPv4Address, IPv6Address
from pathlib import Path
from typing import Union

import geoip2.database
import structlog
from geoip2.models import City
from maxminddb.errors import InvalidDatabaseError
from maxminddb.reader import Metadata

logger = structlog.get_logger()

IPAddress = Union[IPv4Address, IPv6Address]


class DatabaseInitializationError(RuntimeError):
    """Raised when the GeoIP2 database file cannot be opened."""


def resolve_database_path(database_path: str, app_root: str) -> Path:
    """Resolve the configured database path.

    Absolute paths are used as-is; anything else is taken relative to the
    application root directory.

    Args:
        database_path: Configured path (absolute or relative)
        app_root: Application root directory

    Returns:
        Path to pass to the reader
    """
    path = Path(database_path)
    if path.is_absolute():
        return path
    return Path(app_root) / path


class MaxMindDatabase:
    """Process-wide handle on a GeoIP2 City database.

    The reader is opened in the constructor and never re-opened. Queries are
    read-only and safe to run from many threads at once.

    Args:
        db_path: Path to the .mmdb file

    Raises:
        DatabaseInitializationError: If the file is missing, unreadable or
            not a valid MaxMind DB.
    """

    def __init__(self, db_path: Union[str, Path]) -> None:
        self._db_path = str(db_path)
        self._logger = logger.bind(component="maxmind_database", db_path=self._db_path)

        try:
            self._reader = geoip2.database.Reader(self._db_path)
        except (OSError, InvalidDatabaseError) as e:
            self._logger.error("database_open_failed", error=str(e))
            raise DatabaseInitializationError(
                f"Connection to the GeoIP2 database could not be established: {self._db_path}"
            ) from e

        self._logger.info("database_opened")

    @property
    def db_path(self) -> str:
        return self._db_path

    def city(self, address: IPAddress) -> City:
        """Look up the City record for an address.

        Args:
            address: Parsed IPv4 or IPv6 address

        Returns:
            geoip2 City model

        Raises:
            geoip2.errors.AddressNotFoundError: No entry for the address.
            ValueError: The reader has been closed.
            OSError, InvalidDatabaseError: The database could not be read.
        """
        return self._reader.city(address)

    def metadata(self) -> Metadata:
        """Return the metadata block of the open database."""
        return self._reader.metadata()

    def close(self) -> None:
        """Close the underlying reader."""
        self._reader.close()
        self._logger.info("database_closed")
