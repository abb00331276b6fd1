"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    Verifies that the API is running.

    Returns:
        dict: Health status of the API
    """
    return {
        "status": "healthy",
        "api": "healthy",
    }
