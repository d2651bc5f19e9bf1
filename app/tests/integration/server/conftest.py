"""Fixtures for server integration tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter


@pytest.fixture
def server_client(mock_reader_class, reset_client_locator):
    """TestClient over the full application, with a mocked GeoIP2 reader."""
    from server.server import handler

    get_limiter().reset()
    with TestClient(handler) as client:
        yield client
