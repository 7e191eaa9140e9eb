"""
Test configuration and fixtures for taskapi

Every test gets its own SQLite file with the tasks table already in
place, mirroring a production database whose schema pre-exists.
"""
import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import SQLModel
from starlette.testclient import TestClient

from taskapi.core.config import Settings
from taskapi.database import create_db_and_tables, create_session_factory
from taskapi.main import create_app
from taskapi.models import Task  # noqa: F401  registers the table


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "tasks.db"


@pytest.fixture
def schema_engine(db_path):
    """Synchronous engine used to set up and tamper with the schema"""
    engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def settings(db_path, schema_engine):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{db_path}",
        db_pool_size=4,
        _env_file=None,
    )


@pytest.fixture
def client(settings):
    """Test client with the app lifespan (pool open/close) running"""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db_session(db_path):
    """Async session bound to a fresh engine, for service-level tests"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    await create_db_and_tables(engine)
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session
    await engine.dispose()
