import logging

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from taskapi.core.config import Settings

logger = logging.getLogger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the shared async engine; its queue pool is capped at db_pool_size."""
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def check_connection(engine: AsyncEngine) -> None:
    """Check out one pooled connection and round-trip a query."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))


# Dependency for getting DB session
async def get_db(request: Request):
    async with request.app.state.session_factory() as session:
        yield session


# Helper function to create tables (optional, useful for testing)
async def create_db_and_tables(engine: AsyncEngine):
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
