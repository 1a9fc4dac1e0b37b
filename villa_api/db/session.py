"""
Async database session management.
Design: Dependency injection for request-scoped sessions (no connection leaks).
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from villa_api.config import get_settings
from villa_api.db.base import Base

settings = get_settings()


def _engine_options() -> dict:
    """Pool sizing only applies to server databases; SQLite uses its own pool."""
    opts: dict = {"echo": settings.debug, "pool_pre_ping": True}
    if not settings.database_url.startswith("sqlite"):
        opts["pool_size"] = settings.db_pool_size
        opts["max_overflow"] = settings.db_max_overflow
    return opts


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(bind: AsyncEngine) -> None:
    """SQLite's built-in lower() only folds ASCII; replace it with Python's on every connection."""

    @event.listens_for(bind.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower)


engine = create_async_engine(settings.database_url, **_engine_options())
if settings.database_url.startswith("sqlite"):
    register_sqlite_functions(engine)

# Session factory: one session per request
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create missing tables from ORM metadata. Existing tables are left alone."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request. Ensures rollback on error, close on exit."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# Type alias for FastAPI dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
