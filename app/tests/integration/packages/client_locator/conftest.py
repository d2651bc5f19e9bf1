"""Test fixtures for client locator integration tests."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter, setup_rate_limiter
from infrastructure.operations import OperationResult
from infrastructure.services import get_client_locator, get_settings
from packages.client_locator import ClientLocator, resolve_client_ip


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters and fresh settings."""
    get_limiter().reset()
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def locator():
    """ClientLocator double with real header resolution."""
    locator = MagicMock(spec=ClientLocator)
    locator.resolve_client_ip.side_effect = resolve_client_ip
    locator.subdivision_code_for.return_value = OperationResult.success(data="ON")
    return locator


@pytest.fixture
def app(locator):
    """Create FastAPI app with client locator router."""
    from packages.client_locator.routes import router

    app = FastAPI()
    setup_rate_limiter(app)
    app.include_router(router, prefix="/api/v1")
    app.dependency_overrides[get_client_locator] = lambda: locator
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    with TestClient(app) as client:
        yield client
