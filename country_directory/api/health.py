"""Sondes de sante / Health probes (Kubernetes livez/readyz)."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from country_directory.api.deps import get_country_repository
from country_directory.config import settings
from country_directory.repositories import CountryRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def root():
    """Health check."""
    return {"app": settings.APP_NAME, "version": settings.APP_VERSION, "status": "running"}


@router.get("/livez")
async def livez():
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(repository: CountryRepository = Depends(get_country_repository)):
    """Pret si le stockage repond / Ready when storage answers."""
    try:
        await repository.list_all()
    except Exception as exc:
        logger.warning("Readiness check failed: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"ready": False, "storage": settings.STORAGE_BACKEND},
        )
    return {"ready": True, "storage": settings.STORAGE_BACKEND}
