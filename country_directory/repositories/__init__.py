"""Stockage des pays / Country storage backends."""

from country_directory.repositories.base import CountryRepository
from country_directory.repositories.memory import InMemoryCountryRepository
from country_directory.repositories.sql import SqlCountryRepository

__all__ = [
    "CountryRepository",
    "InMemoryCountryRepository",
    "SqlCountryRepository",
]
