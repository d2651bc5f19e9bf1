from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from infrastructure.services.providers import get_settings
from packages.client_locator.headers import resolve_client_ip


def remote_address(request: Request) -> str:
    """Transport-level peer address, or an empty string when unavailable."""
    return request.client.host if request.client else ""


def client_ip_key_func(request: Request) -> str:
    """Rate limit key: the client IP resolved from forwarding headers."""
    return resolve_client_ip(request.headers, remote_address(request))


limiter = Limiter(
    key_func=client_ip_key_func,
)


async def rate_limit_handler(_request: Request, exc: Exception):
    """Custom rate limit handler that returns a 429 status code and a custom error message."""
    if isinstance(exc, RateLimitExceeded):
        return JSONResponse(
            status_code=429,
            content={"message": "Rate limit exceeded"},
        )


def get_rate_limit() -> str:
    """Rate limit applied to lookup endpoints, from settings."""
    return get_settings().server.RATE_LIMIT


def setup_rate_limiter(app: FastAPI):
    """
    Setup rate limiting for the FastAPI application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
