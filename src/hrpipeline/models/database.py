"""Database connection and session management."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hrpipeline.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """Pool options are only valid for server databases, not SQLite."""
    if url.startswith("sqlite"):
        return {"echo": settings.database_echo}
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "echo": settings.database_echo,
        "pool_pre_ping": True,
    }


# Create async engine
async_engine = create_async_engine(
    settings.database_url,
    **_engine_options(settings.database_url),
)

# Session factory
async_session_maker = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def init_db() -> None:
    """Initialize database connection."""
    # Just verify the connection works
    async with async_engine.begin() as conn:
        await conn.run_sync(lambda _: None)


async def close_db() -> None:
    """Close database connections."""
    await async_engine.dispose()
