"""
Dépendances d'injection / Dependency injection.
Injectées dans les routes via Depends().
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from country_directory.config import settings
from country_directory.database import get_db
from country_directory.repositories import (
    CountryRepository,
    InMemoryCountryRepository,
    SqlCountryRepository,
)
from country_directory.services.country_service import CountryService


def get_country_repository(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> CountryRepository:
    """Stockage selon STORAGE_BACKEND / Storage according to STORAGE_BACKEND.

    memory : une instance par application (app.state) / one instance per app.
    sql : la session transactionnelle de la requete / the request's transactional session.
    """
    if settings.STORAGE_BACKEND == "memory":
        store = getattr(request.app.state, "country_store", None)
        if store is None:
            store = request.app.state.country_store = InMemoryCountryRepository()
        return store
    return SqlCountryRepository(db)


def get_country_service(
    repository: CountryRepository = Depends(get_country_repository),
) -> CountryService:
    return CountryService(repository)
