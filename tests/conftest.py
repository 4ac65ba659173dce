"""Shared async fixtures: in-memory database and HTTP client"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.orm import sessionmaker

from app.infrastructure.database.connection import (
    create_engine_for_url,
    drop_models,
    get_async_db,
    init_models,
)
from app.infrastructure.repositories.user_repository import UserRepository
from app.main import app

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with the schema created"""
    engine = create_engine_for_url(SQLALCHEMY_DATABASE_URL)
    await init_models(engine)

    yield engine

    await drop_models(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory: sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest_asyncio.fixture
async def async_client(session_factory: sessionmaker) -> AsyncGenerator[AsyncClient, None]:
    """Async test client whose requests use the in-memory database"""

    async def override_get_async_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            finally:
                await session.close()

    app.dependency_overrides[get_async_db] = override_get_async_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
