from fastapi import APIRouter, HTTPException, Request
from api.dependencies.rate_limits import get_limiter
from infrastructure.services import ClientLocatorDep, SettingsDep
from packages.client_locator.schemas import DatabaseHealthResponse

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Polled by load balancer healthchecks
@router.get("/version")
@limiter.limit("50/minute")
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit("50/minute")
def get_health(request: Request):  # pylint: disable=unused-argument
    """Healthcheck endpoint."""
    return {"status": "ok"}


@router.get("/health/database", response_model=DatabaseHealthResponse)
@limiter.limit("50/minute")
def get_database_health(request: Request, locator: ClientLocatorDep):  # pylint: disable=unused-argument
    """GeoIP2 database healthcheck."""
    result = locator.healthcheck()
    if not result.is_success:
        raise HTTPException(status_code=503, detail=result.message)
    return DatabaseHealthResponse(**result.data)
