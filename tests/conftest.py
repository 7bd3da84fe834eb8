"""Fixtures partagees / Shared fixtures."""

import os

# Avant tout import de l'application / Before any application import
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_JSON", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from country_directory.api.deps import get_country_repository
from country_directory.database import Base
from country_directory.main import app
from country_directory.repositories import InMemoryCountryRepository, SqlCountryRepository
from country_directory.services.country_service import CountryService


@pytest.fixture
def store():
    return InMemoryCountryRepository()


@pytest.fixture
def service(store):
    return CountryService(store)


@pytest.fixture
async def sql_session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def sql_repository(sql_session):
    return SqlCountryRepository(sql_session)


async def _client_for(repository):
    app.dependency_overrides[get_country_repository] = lambda: repository
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def client(store):
    async for ac in _client_for(store):
        yield ac


@pytest.fixture
async def sql_client(sql_repository):
    async for ac in _client_for(sql_repository):
        yield ac
