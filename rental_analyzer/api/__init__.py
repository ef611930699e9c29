"""
API routes for the rental property analyzer.
"""

from fastapi import APIRouter

from rental_analyzer.api import properties, calculations

router = APIRouter()

# Include sub-routers
router.include_router(properties.router, prefix="/properties", tags=["properties"])
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
