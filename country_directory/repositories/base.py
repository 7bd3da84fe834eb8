"""
Interface de stockage / Storage interface.

Injectee dans le service pour pouvoir changer de backend (memoire, SQL)
et isoler les tests.
Injected into the service so backends (memory, SQL) can be swapped and
tests isolated.
"""

from typing import Protocol

from country_directory.schemas.country import CountryRead


class CountryRepository(Protocol):
    async def list_all(self) -> list[CountryRead]:
        """Tous les pays, ordre d'insertion / All countries, insertion order."""
        ...

    async def get(self, country_id: int) -> CountryRead | None:
        ...

    async def get_by_name(self, name: str) -> CountryRead | None:
        """Premier pays insere portant ce nom / Earliest inserted country with this name."""
        ...

    async def add(self, name: str, capital: str, country_id: int | None = None) -> CountryRead:
        """Inserer ; ConflictError si l'id existe / Insert; ConflictError if the id exists."""
        ...

    async def replace(self, country_id: int, name: str, capital: str) -> CountryRead | None:
        ...

    async def delete(self, country_id: int) -> bool:
        ...
