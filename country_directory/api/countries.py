"""Routes Pays / Country API routes.

Chemins historiques du service d'origine (``/getcountries``, ``/addcountry``...).
Legacy paths of the original service (``/getcountries``, ``/addcountry``...).
"""

from fastapi import APIRouter, Depends, Path, Query, Request, Response

from country_directory.api.deps import get_country_service
from country_directory.config import settings
from country_directory.rate_limit import limiter
from country_directory.schemas.country import (
    MAX_COUNTRY_ID,
    CountryCreate,
    CountryRead,
    CountryUpdate,
    ErrorRead,
)
from country_directory.services.country_service import CountryService

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorRead}, 422: {"model": ErrorRead}}


@router.get("/getcountries", response_model=list[CountryRead])
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def list_countries(request: Request, service: CountryService = Depends(get_country_service)):
    """Lister tous les pays / List all countries."""
    return await service.list_countries()


# Declare avant /{country_id} / Declared before /{country_id}
@router.get("/getcountries/countryname", response_model=CountryRead, responses=_NOT_FOUND)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def get_country_by_name(
    request: Request,
    name: str = Query(..., min_length=1),
    service: CountryService = Depends(get_country_service),
):
    """Obtenir un pays par nom exact / Get country by exact name."""
    return await service.get_country_by_name(name)


@router.get("/getcountries/{country_id}", response_model=CountryRead, responses=_NOT_FOUND)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def get_country(
    request: Request,
    country_id: int = Path(ge=1, le=MAX_COUNTRY_ID),
    service: CountryService = Depends(get_country_service),
):
    """Obtenir un pays par ID / Get country by ID."""
    return await service.get_country(country_id)


@router.post(
    "/addcountry",
    response_model=CountryRead,
    status_code=201,
    responses={409: {"model": ErrorRead}, 422: {"model": ErrorRead}},
)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def create_country(
    request: Request,
    data: CountryCreate,
    service: CountryService = Depends(get_country_service),
):
    """Créer un pays / Create a country."""
    return await service.create_country(data)


@router.put("/updatecountry/{country_id}", response_model=CountryRead, responses=_NOT_FOUND)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def update_country(
    request: Request,
    data: CountryUpdate,
    country_id: int = Path(ge=1, le=MAX_COUNTRY_ID),
    service: CountryService = Depends(get_country_service),
):
    """Modifier un pays / Update a country."""
    return await service.update_country(country_id, data)


@router.delete("/deletecountry/{country_id}", status_code=204, responses=_NOT_FOUND)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def delete_country(
    request: Request,
    country_id: int = Path(ge=1, le=MAX_COUNTRY_ID),
    service: CountryService = Depends(get_country_service),
):
    """Supprimer un pays / Delete a country."""
    await service.delete_country(country_id)
    return Response(status_code=204)
