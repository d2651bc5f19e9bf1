from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from api.dependencies.rate_limits import client_ip_key_func, setup_rate_limiter
from infrastructure.logging import (
    bind_request_context,
    get_correlation_id,
    get_module_logger,
)
from infrastructure.services.providers import get_settings
from server.lifespan import lifespan

logger = get_module_logger()
settings = get_settings()


handler = FastAPI(title="Client Locator", lifespan=lifespan)
setup_rate_limiter(handler)


allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@handler.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind correlation ID and resolved client IP to every log line of a request."""
    with bind_request_context(
        correlation_id=request.headers.get("X-Correlation-ID"),
        client_ip=client_ip_key_func(request),
        request_path=request.url.path,
        request_method=request.method,
    ):
        response = await call_next(request)
        correlation_id = get_correlation_id()
        if correlation_id:
            response.headers["X-Correlation-ID"] = correlation_id
        logger.info("request_completed", status_code=response.status_code)
        return response


handler.include_router(api_router)
