"""Shared fixtures for client locator tests.

The GeoIP2 reader is always mocked; no .mmdb file is needed to run tests.
"""

from unittest.mock import Mock

import pytest

from infrastructure.services import providers
from tests.factories.geoip import make_city_response, make_metadata


@pytest.fixture
def mock_reader():
    """A geoip2.database.Reader instance double."""
    reader = Mock()
    reader.city.return_value = make_city_response("ON")
    reader.metadata.return_value = make_metadata()
    return reader


@pytest.fixture
def mock_reader_class(mock_reader, monkeypatch):
    """Patch geoip2.database.Reader so opening a database returns mock_reader."""
    reader_class = Mock(return_value=mock_reader)
    monkeypatch.setattr("geoip2.database.Reader", reader_class)
    return reader_class


@pytest.fixture
def reset_client_locator(monkeypatch):
    """Give the test a fresh process-wide client locator cell."""
    monkeypatch.setattr(providers, "_client_locator", None)
    monkeypatch.setattr(providers, "_client_locator_error", None)
    providers.get_settings.cache_clear()
    yield
    providers.get_settings.cache_clear()
