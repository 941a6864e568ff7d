import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from visited_places.api.v1.routes.categories import router as categories_router
from visited_places.api.v1.routes.health import router as health_router
from visited_places.api.v1.routes.locations import router as locations_router
from visited_places.api.v1.routes.maps import router as maps_router
from visited_places.config import get_settings
from visited_places.infrastructure.persistence.db import Base, engine
from visited_places.infrastructure.persistence import models  # noqa: F401  registers tables

logger = logging.getLogger(__name__)


def initialize_database():
    """Create tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("Starting up application...")

    if get_settings().USE_DB_REPOS:
        try:
            initialize_database()
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            # Continue anyway - map endpoints work without DB

    yield

    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    settings = get_settings()
    app = FastAPI(
        title=settings.APP_TITLE,
        version=settings.APP_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(locations_router, prefix="/api/v1")
    app.include_router(categories_router, prefix="/api/v1")
    app.include_router(maps_router, prefix="/api/v1")
    app.include_router(health_router, prefix="/api/v1")
    return app


app = create_app()


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
