"""Async engine and session factory for the configured database."""
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from budgethero.config import Settings, settings


def create_engine_from_settings(config: Settings = settings) -> AsyncEngine:
    """Build the engine for ``config.database_url``.

    SQL echo is only honoured in development; statement parameters can hold
    transaction descriptions.
    """
    echo = config.db_echo and config.app_env.lower() == "development"
    return create_async_engine(config.database_url, echo=echo, pool_pre_ping=True)


async_engine = create_engine_from_settings()

AsyncSessionLocal = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
