"""API endpoints for the ATS API."""

from fastapi import APIRouter

from .health import router as health_router
from .candidates import router as candidates_router
from .positions import router as positions_router

# Create main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router, prefix="/health", tags=["Health"])
api_router.include_router(candidates_router, prefix="/candidates", tags=["Candidates"])
api_router.include_router(positions_router, prefix="/positions", tags=["Positions"])

__all__ = ["api_router"]
