"""Stockage en memoire / In-memory storage."""

import asyncio

from country_directory.errors import ConflictError
from country_directory.schemas.country import MAX_COUNTRY_ID, CountryRead


class InMemoryCountryRepository:
    """Dict ordonne protege par un verrou / Ordered dict guarded by a lock.

    Les enregistrements sont immuables, un lecteur voit l'etat avant ou apres
    une ecriture, jamais un etat partiel.
    Records are immutable, so a reader sees the state before or after a
    write, never a partial one.
    """

    def __init__(self, countries: list[CountryRead] | None = None):
        self._countries: dict[int, CountryRead] = {}
        self._lock = asyncio.Lock()
        for country in countries or []:
            self._countries[country.id] = country

    async def list_all(self) -> list[CountryRead]:
        return list(self._countries.values())

    async def get(self, country_id: int) -> CountryRead | None:
        return self._countries.get(country_id)

    async def get_by_name(self, name: str) -> CountryRead | None:
        return next((c for c in self._countries.values() if c.name == name), None)

    async def add(self, name: str, capital: str, country_id: int | None = None) -> CountryRead:
        async with self._lock:
            if country_id is None:
                country_id = max(self._countries, default=0) + 1
                if country_id > MAX_COUNTRY_ID:
                    raise ConflictError("No country id left to assign; supply idCountry")
            elif country_id in self._countries:
                raise ConflictError(f"Country {country_id} already exists")
            country = CountryRead(id=country_id, name=name, capital=capital)
            self._countries[country_id] = country
            return country

    async def replace(self, country_id: int, name: str, capital: str) -> CountryRead | None:
        async with self._lock:
            if country_id not in self._countries:
                return None
            # Garde la position d'insertion / Keeps the insertion position
            country = CountryRead(id=country_id, name=name, capital=capital)
            self._countries[country_id] = country
            return country

    async def delete(self, country_id: int) -> bool:
        async with self._lock:
            return self._countries.pop(country_id, None) is not None
