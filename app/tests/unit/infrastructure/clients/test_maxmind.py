"""Unit tests for MaxMind infrastructure client."""

import ipaddress
from pathlib import Path
from unittest.mock import Mock

import pytest
from maxminddb.errors import InvalidDatabaseError

from infrastructure.clients.maxmind import (
    DatabaseInitializationError,
    MaxMindDatabase,
    resolve_database_path,
)


@pytest.mark.unit
class TestResolveDatabasePath:
    def test_absolute_path_unchanged(self):
        assert resolve_database_path("/data/City.mmdb", "/srv/app") == Path(
            "/data/City.mmdb"
        )

    def test_relative_path_joined_to_app_root(self):
        assert resolve_database_path("geodb/City.mmdb", "/srv/app") == Path(
            "/srv/app/geodb/City.mmdb"
        )

    def test_relative_app_root(self):
        assert resolve_database_path("City.mmdb", ".") == Path("City.mmdb")


@pytest.mark.unit
def test_maxmind_database_opens_reader(mock_reader_class):
    """Test the reader is opened once at construction."""
    database = MaxMindDatabase("/path/to/GeoLite2-City.mmdb")

    mock_reader_class.assert_called_once_with("/path/to/GeoLite2-City.mmdb")
    assert database.db_path == "/path/to/GeoLite2-City.mmdb"


@pytest.mark.unit
def test_maxmind_database_accepts_path_objects(mock_reader_class):
    MaxMindDatabase(Path("/path/to/GeoLite2-City.mmdb"))

    mock_reader_class.assert_called_once_with("/path/to/GeoLite2-City.mmdb")


@pytest.mark.unit
@pytest.mark.parametrize(
    "error",
    [
        FileNotFoundError("DB not found"),
        PermissionError("Permission denied"),
        IsADirectoryError("Is a directory"),
        InvalidDatabaseError("Error opening database file. Is this a valid MaxMind DB file?"),
    ],
)
def test_maxmind_database_open_failure(monkeypatch, error):
    """Test missing, unreadable and malformed files raise an initialization error."""
    monkeypatch.setattr("geoip2.database.Reader", Mock(side_effect=error))

    with pytest.raises(DatabaseInitializationError) as exc_info:
        MaxMindDatabase("/path/to/GeoLite2-City.mmdb")

    assert exc_info.value.__cause__ is error
    assert "could not be established" in str(exc_info.value)


@pytest.mark.unit
def test_maxmind_database_city_delegates(mock_reader_class, mock_reader):
    database = MaxMindDatabase("/path/to/GeoLite2-City.mmdb")
    address = ipaddress.ip_address("8.8.8.8")

    response = database.city(address)

    assert response is mock_reader.city.return_value
    mock_reader.city.assert_called_once_with(address)


@pytest.mark.unit
def test_maxmind_database_metadata(mock_reader_class, mock_reader):
    database = MaxMindDatabase("/path/to/GeoLite2-City.mmdb")

    assert database.metadata().database_type == "GeoLite2-City"


@pytest.mark.unit
def test_maxmind_database_close(mock_reader_class, mock_reader):
    database = MaxMindDatabase("/path/to/GeoLite2-City.mmdb")

    database.close()

    mock_reader.close.assert_called_once()
