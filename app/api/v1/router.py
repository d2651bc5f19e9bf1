from fastapi import APIRouter
from packages.client_locator.routes import router as client_locator_router


# Main v1 router
router = APIRouter()
router.include_router(client_locator_router)
