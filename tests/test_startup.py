"""
Test application startup and the process entry point
"""
import pytest
from sqlalchemy.exc import SQLAlchemyError
from starlette.testclient import TestClient

import taskapi.__main__ as entrypoint
from taskapi.core.config import Settings, get_settings
from taskapi.main import create_app


@pytest.fixture
def bare_env(monkeypatch, tmp_path):
    """No .env file, no ambient configuration, no logging reconfiguration"""
    for name in ("DATABASE_URL", "SERVER_ADDRESS", "DB_POOL_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(entrypoint, "setup_logging", lambda *args, **kwargs: None)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_lifespan_opens_and_closes_pool(settings):
    app = create_app(settings)

    with TestClient(app) as client:
        assert app.state.engine.pool.size() == settings.db_pool_size
        assert client.get("/tasks").status_code == 200


def test_unreachable_database_aborts_startup(tmp_path):
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path}/missing/dir/tasks.db",
        _env_file=None,
    )

    with pytest.raises(SQLAlchemyError):
        with TestClient(create_app(settings)):
            pass


def test_main_exits_nonzero_without_database_url(bare_env):
    assert entrypoint.main() == 1


def test_main_serves_on_configured_address(bare_env):
    served = {}

    def fake_run(app, host, port, **kwargs):
        served.update(app=app, host=host, port=port)

    bare_env.setattr(entrypoint.uvicorn, "run", fake_run)
    bare_env.setenv("DATABASE_URL", "postgres://u@db/tasks")
    bare_env.setenv("SERVER_ADDRESS", "127.0.0.1:9123")

    assert entrypoint.main() == 0
    assert served["host"] == "127.0.0.1"
    assert served["port"] == 9123
    assert served["app"].state.settings.database_url == "postgresql+asyncpg://u@db/tasks"


def test_main_exits_nonzero_on_unknown_log_level(bare_env):
    bare_env.setenv("DATABASE_URL", "postgres://u@db/tasks")
    bare_env.setenv("LOG_LEVEL", "chatty")

    assert entrypoint.main() == 1
