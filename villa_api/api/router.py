"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from villa_api.api.endpoints import health, villas

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(villas.router, prefix="/VillaAPI", tags=["villas"])
