"""Database connection and session management."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from user_location_api.core.config import settings


def build_async_engine(url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """
    Create an async engine for the given database URL.

    SQLite file databases get the default pool; server databases get the
    sized pool with pre-ping.
    """
    if make_url(url).get_backend_name() != "sqlite":
        kwargs.setdefault("pool_pre_ping", True)
        kwargs.setdefault("pool_size", 10)
        kwargs.setdefault("max_overflow", 20)
    return create_async_engine(url, echo=echo, **kwargs)


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


# Create async engine
async_engine = build_async_engine(settings.DATABASE_URL_ASYNC, echo=settings.DEBUG)

# Create session factory
async_session_maker = build_session_maker(async_engine)


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Dependency returning the application session factory."""
    return async_session_maker


@asynccontextmanager
async def get_db(
    session_maker: Optional[async_sessionmaker[AsyncSession]] = None,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Get an async database session.

    Args:
        session_maker: Session factory to use, defaults to the application one

    Yields:
        AsyncSession: Database session
    """
    async with (session_maker or async_session_maker)() as session:
        try:
            yield session
            # Don't auto-commit - let the caller decide
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(engine: Optional[AsyncEngine] = None) -> None:
    """Create database tables from the ORM metadata."""
    # Import models to ensure they are registered
    from user_location_api.models import Base

    async with (engine or async_engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
