"""Stockage SQL / SQL storage (SQLAlchemy 2.0 async)."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from country_directory.errors import ConflictError
from country_directory.models.country import Country
from country_directory.schemas.country import MAX_COUNTRY_ID, CountryRead

logger = logging.getLogger(__name__)

# Tentatives d'attribution d'id sous concurrence / Id assignment attempts under concurrency
ASSIGN_ID_ATTEMPTS = 5


class SqlCountryRepository:
    """Pays stockes dans la table ``countries`` / Countries stored in the ``countries`` table.

    La transaction appartient a l'appelant (voir ``get_db``) ; ici on ne fait
    que ``flush`` ou des savepoints.
    The caller owns the transaction (see ``get_db``); this class only flushes
    or uses savepoints.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _row(self, country_id: int) -> Country | None:
        result = await self.session.execute(
            select(Country).where(Country.id_country == country_id)
        )
        return result.scalar_one_or_none()

    async def _next_id(self) -> int:
        current_max = await self.session.scalar(select(func.max(Country.id_country)))
        next_id = (current_max or 0) + 1
        if next_id > MAX_COUNTRY_ID:
            raise ConflictError("No country id left to assign; supply idCountry")
        return next_id

    async def _insert(self, country_id: int, name: str, capital: str) -> Country:
        """Insertion dans un savepoint / Insert inside a savepoint.

        Un IntegrityError n'annule que le savepoint, pas la transaction.
        An IntegrityError only rolls back the savepoint, not the transaction.
        """
        row = Country(id_country=country_id, name=name, capital=capital)
        async with self.session.begin_nested():
            self.session.add(row)
        return row

    async def list_all(self) -> list[CountryRead]:
        result = await self.session.execute(select(Country).order_by(Country.pk))
        return [CountryRead.from_orm_row(row) for row in result.scalars().all()]

    async def get(self, country_id: int) -> CountryRead | None:
        row = await self._row(country_id)
        return CountryRead.from_orm_row(row) if row else None

    async def get_by_name(self, name: str) -> CountryRead | None:
        result = await self.session.execute(
            select(Country).where(Country.name == name).order_by(Country.pk).limit(1)
        )
        row = result.scalars().first()
        return CountryRead.from_orm_row(row) if row else None

    async def add(self, name: str, capital: str, country_id: int | None = None) -> CountryRead:
        if country_id is not None:
            if await self._row(country_id) is not None:
                raise ConflictError(f"Country {country_id} already exists")
            try:
                row = await self._insert(country_id, name, capital)
            except IntegrityError as exc:
                # Insertion concurrente du meme id / Concurrent insert of the same id
                logger.warning("Integrity error inserting country %s: %s", country_id, exc.orig)
                raise ConflictError(f"Country {country_id} already exists") from exc
            return CountryRead.from_orm_row(row)

        for attempt in range(1, ASSIGN_ID_ATTEMPTS + 1):
            next_id = await self._next_id()
            try:
                row = await self._insert(next_id, name, capital)
            except IntegrityError:
                logger.info("Assigned id %s taken concurrently (attempt %s)", next_id, attempt)
                continue
            return CountryRead.from_orm_row(row)
        raise ConflictError("Could not assign a country id, retry the request")

    async def replace(self, country_id: int, name: str, capital: str) -> CountryRead | None:
        row = await self._row(country_id)
        if row is None:
            return None
        row.name = name
        row.capital = capital
        await self.session.flush()
        return CountryRead.from_orm_row(row)

    async def delete(self, country_id: int) -> bool:
        row = await self._row(country_id)
        if row is None:
            return False
        await self.session.delete(row)
        await self.session.flush()
        return True
