import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from taskapi.core.config import Settings, get_settings
from taskapi.database import check_connection, create_engine, create_session_factory
from taskapi.routers import tasks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings or get_settings()
    engine = create_engine(settings)
    try:
        await check_connection(engine)
    except Exception:
        logger.critical("Failed to connect to the database")
        await engine.dispose()
        raise
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    yield
    await engine.dispose()
    logger.info("Database pool closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="Task API",
        description="Minimal async CRUD API over a single tasks table",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Include routers
    app.include_router(tasks.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello, World!"

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
