"""Database connection and session management"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings


def create_engine_for_url(database_url: str) -> AsyncEngine:
    """Create an async SQLite engine

    Only in-memory databases share a single connection; file databases give
    every session its own connection so one request's rollback cannot undo
    another request's insert.
    """
    # Convert SQLite URL to async format
    async_database_url = database_url.replace("sqlite:///", "sqlite+aiosqlite:///")

    engine_options: dict = {}
    if ":memory:" in async_database_url:
        engine_options["poolclass"] = StaticPool

    return create_async_engine(
        async_database_url,
        connect_args={
            "check_same_thread": False,
            "timeout": settings.database_timeout_seconds,
        },
        echo=settings.debug,
        **engine_options,
    )


# Create async SQLite engine
async_engine = create_engine_for_url(settings.database_url)

# Create async session factory
AsyncSessionLocal = sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

# Base class for all models
Base = declarative_base()


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get async database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_models(engine: AsyncEngine = async_engine) -> None:
    """Create all database tables that do not exist yet"""
    # Register models on Base.metadata before create_all
    from app.infrastructure.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_models(engine: AsyncEngine = async_engine) -> None:
    """Drop all database tables"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
