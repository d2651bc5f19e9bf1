"""FastAPI routes for client locator package."""

from fastapi import APIRouter, HTTPException, Query, Request

from api.dependencies.rate_limits import get_limiter, get_rate_limit, remote_address
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from infrastructure.services import ClientLocatorDep
from packages.client_locator.schemas import ClientIpResponse, SubdivisionResponse

logger = get_module_logger()
router = APIRouter(tags=["Client Locator"])
limiter = get_limiter()

_ERROR_STATUS_CODES = {
    OperationStatus.INVALID_ADDRESS: 400,
    OperationStatus.NOT_FOUND: 404,
    OperationStatus.IO_FAILURE: 503,
}


def _subdivision_response(ip_address: str, result: OperationResult) -> SubdivisionResponse:
    if result.is_success:
        return SubdivisionResponse(ip_address=ip_address, subdivision_code=result.data)

    status_code = _ERROR_STATUS_CODES.get(result.status, 500)
    logger.warning(
        "subdivision_lookup_failed",
        ip_address=ip_address,
        status=result.status.value,
        error_code=result.error_code,
    )
    if status_code == 503:
        raise HTTPException(status_code=503, detail="Geolocation database unavailable")
    raise HTTPException(status_code=status_code, detail=result.message)


@router.get(
    "/client-ip",
    response_model=ClientIpResponse,
    summary="Resolve Client IP",
    description="Resolve the caller's IP from proxy-forwarding headers",
)
@limiter.limit(get_rate_limit)
def get_client_ip(request: Request, locator: ClientLocatorDep) -> ClientIpResponse:
    ip_address = locator.resolve_client_ip(request.headers, remote_address(request))
    return ClientIpResponse(ip_address=ip_address)


@router.get(
    "/subdivision",
    response_model=SubdivisionResponse,
    summary="Subdivision For IP Address",
    description="Query the GeoIP2 database for the subdivision ISO code of an IP",
)
@limiter.limit(get_rate_limit)
def get_subdivision(
    request: Request,
    locator: ClientLocatorDep,
    ip_address: str = Query(..., description="IPv4 or IPv6 address"),
) -> SubdivisionResponse:
    """Look up the subdivision ISO code of an IP address.

    Raises:
        HTTPException: 400 for invalid IP, 404 if not found, 503 if the
            database cannot be read
    """
    result = locator.subdivision_code_for(ip_address)
    return _subdivision_response(ip_address, result)


@router.get(
    "/locate",
    response_model=SubdivisionResponse,
    summary="Locate Caller",
    description="Resolve the caller's IP and look up its subdivision ISO code",
)
@limiter.limit(get_rate_limit)
def get_locate(request: Request, locator: ClientLocatorDep) -> SubdivisionResponse:
    """Resolve the caller's IP, then look up its subdivision.

    Raises:
        HTTPException: 400 if the resolved value is not an IP, 404 if not
            found, 503 if the database cannot be read
    """
    ip_address = locator.resolve_client_ip(request.headers, remote_address(request))
    result = locator.subdivision_code_for(ip_address)
    return _subdivision_response(ip_address, result)
