from typing import Any

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from .settings import settings
from greeting_api.infrastructure.persistence.repositories_sqlalchemy import init_models

engine_options: dict[str, Any] = {"echo": settings.debug}
if settings.database.serverless:
    engine_options["poolclass"] = NullPool

# Database setup
engine = create_async_engine(settings.database.url, **engine_options)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_database_session() -> AsyncSession:
    """Dependency to get database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_database_models() -> None:
    """Ensure database tables are created"""

    await init_models(engine)


async def dispose_engine() -> None:
    """Release pooled connections on shutdown"""

    await engine.dispose()
