"""Routes API / API routes."""

from fastapi import APIRouter

from country_directory.api import countries, health

api_router = APIRouter()

api_router.include_router(countries.router, tags=["countries"])
api_router.include_router(health.router, tags=["health"])
