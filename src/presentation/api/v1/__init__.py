"""API v1 routers.

Resources:
    /api/v1/residentsInPlanets    - Residents of planets appearing in > N films
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.api.v1.residencies import router as residencies_router

# Create combined v1 router
v1_router = APIRouter(prefix=settings.api_v1_prefix)

# Include all resource routers
v1_router.include_router(residencies_router)

# Export individual routers for testing
__all__ = [
    "v1_router",
    "residencies_router",
]
