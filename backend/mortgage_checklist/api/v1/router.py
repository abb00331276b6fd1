"""API v1 router configuration."""

from fastapi import APIRouter

from mortgage_checklist.api.v1.endpoints import checklists, health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    checklists.router,
    prefix="/checklists",
    tags=["checklists"],
)
