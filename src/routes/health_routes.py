"""
Health Check Routes

System health and status endpoints.
"""

from fastapi import APIRouter
from models.schemas import HealthResponse
from config.settings import settings


router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns the current status and version of the system.

    Returns:
        HealthResponse with status and version information
    """
    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION
    )


@router.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "description": "Turn customer reviews into a sales growth strategy",
        "endpoints": {
            "health": "/health",
            "languages": "/analysis/languages",
            "strength": "/analysis/strength",
            "submit": "/analysis/submit",
            "example": "/analysis/example",
            "state": "/analysis/state"
        },
        "workflow": {
            "step_1": "POST /analysis/submit - Submit pasted reviews (one analysis at a time)",
            "step_2": "GET /analysis/state - Poll until status is 'succeeded' or 'failed'"
        }
    }
