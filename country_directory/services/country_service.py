"""
Service annuaire des pays / Country directory service.

Logique CRUD au-dessus d'un stockage injecte ; les erreurs sont levees ici et
converties en reponses HTTP par les handlers de ``country_directory.errors``.
CRUD logic over an injected repository; errors are raised here and turned
into HTTP responses by the handlers in ``country_directory.errors``.
"""

import logging

from country_directory.errors import ConflictError, NotFoundError, PayloadValidationError
from country_directory.metrics import COUNTRY_MUTATIONS
from country_directory.repositories.base import CountryRepository
from country_directory.schemas.country import CountryCreate, CountryRead, CountryUpdate

logger = logging.getLogger(__name__)


class CountryService:
    """Operations sur les pays / Country operations."""

    def __init__(self, repository: CountryRepository):
        self.repository = repository

    async def list_countries(self) -> list[CountryRead]:
        return await self.repository.list_all()

    async def get_country(self, country_id: int) -> CountryRead:
        country = await self.repository.get(country_id)
        if country is None:
            raise NotFoundError(f"Country {country_id} not found")
        return country

    async def get_country_by_name(self, name: str) -> CountryRead:
        """Correspondance exacte, premier insere / Exact match, earliest inserted.

        Le nom est rogne comme les noms stockes / The name is trimmed like stored names.
        """
        name = name.strip()
        country = await self.repository.get_by_name(name)
        if country is None:
            raise NotFoundError(f"Country named '{name}' not found")
        return country

    async def create_country(self, data: CountryCreate) -> CountryRead:
        try:
            country = await self.repository.add(data.name, data.capital, country_id=data.id)
        except ConflictError:
            COUNTRY_MUTATIONS.labels(operation="create", outcome="conflict").inc()
            logger.warning("Create rejected: country %s already exists", data.id)
            raise
        COUNTRY_MUTATIONS.labels(operation="create", outcome="ok").inc()
        logger.info("Created country %s (%s)", country.id, country.name)
        return country

    async def update_country(self, country_id: int, data: CountryUpdate) -> CountryRead:
        if data.id is not None and data.id != country_id:
            COUNTRY_MUTATIONS.labels(operation="update", outcome="invalid").inc()
            raise PayloadValidationError(
                f"Payload idCountry {data.id} does not match path id {country_id}"
            )
        country = await self.repository.replace(country_id, data.name, data.capital)
        if country is None:
            COUNTRY_MUTATIONS.labels(operation="update", outcome="not_found").inc()
            raise NotFoundError(f"Country {country_id} not found")
        COUNTRY_MUTATIONS.labels(operation="update", outcome="ok").inc()
        logger.info("Updated country %s", country_id)
        return country

    async def delete_country(self, country_id: int) -> None:
        if not await self.repository.delete(country_id):
            COUNTRY_MUTATIONS.labels(operation="delete", outcome="not_found").inc()
            raise NotFoundError(f"Country {country_id} not found")
        COUNTRY_MUTATIONS.labels(operation="delete", outcome="ok").inc()
        logger.info("Deleted country %s", country_id)
