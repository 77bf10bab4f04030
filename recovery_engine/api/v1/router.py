"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from recovery_engine.api.v1.endpoints import analytics, catalog

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
api_router.include_router(
    catalog.router, prefix="/exercises", tags=["Exercise catalog"]
)
