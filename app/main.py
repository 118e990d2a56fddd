"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1 import api_router
from app.core.config import Settings, get_settings
from app.db.base import Base
from app.db.session import build_engine, build_session_maker
from app.models import KeyValueBlob  # noqa: F401 - register table on Base.metadata
from app.services.blob_repository import load_blobs
from app.services.storage import MemoryBlobStore
from app.services.tracker import Tracker

logger = logging.getLogger(__name__)


async def _load_store(app: FastAPI) -> MemoryBlobStore:
    """All persisted blobs; a database failure means a cold start, not a crash."""
    try:
        async with app.state.session_maker() as session:
            return MemoryBlobStore(await load_blobs(session))
    except SQLAlchemyError as e:
        logger.exception("Could not load stored state, starting from defaults: %s", e)
        return MemoryBlobStore()


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: load blobs and build the tracker; shutdown: dispose the engine."""
        if settings.auto_create_tables:
            async with app.state.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        app.state.tracker = Tracker(await _load_store(app), settings=settings)
        logger.info("Tracker ready, next workout %s", app.state.tracker.plan.workout_type.value)
        yield
        await app.state.engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_maker = build_session_maker(app.state.engine)

    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
