"""MaxMind GeoIP2 client for infrastructure layer.

Public API (Package Level):
- MaxMindDatabase: Handle on an opened GeoIP2 City database
- DatabaseInitializationError: Raised when the database cannot be opened
- resolve_database_path: Resolve a configured path against the app root

Note: Application code should obtain the database through
infrastructure.services.get_client_locator, not open it directly.
"""

from infrastructure.clients.maxmind.client import (
    DatabaseInitializationError,
    IPAddress,
    MaxMindDatabase,
    resolve_database_path,
)

__all__ = [
    "DatabaseInitializationError",
    "IPAddress",
    "MaxMindDatabase",
    "resolve_database_path",
]
