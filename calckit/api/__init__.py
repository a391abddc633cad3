"""
API routes for the calculators.
"""

from fastapi import APIRouter

from calckit.api import algebra, converters

router = APIRouter()

# Include sub-routers
router.include_router(converters.router, prefix="/convert", tags=["converters"])
router.include_router(algebra.router, prefix="/algebra", tags=["algebra"])
