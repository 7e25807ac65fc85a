"""
FastAPI main application with DDD architecture
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from cinema.core.config import settings
from cinema.core.logging import setup_logging
from cinema.api.router import api_router
from cinema.api.exception_handlers import setup_exception_handlers
from cinema.application.use_cases.seed_reference_data import SeedReferenceDataUseCase
from cinema.db.database import SessionLocal, engine
from cinema.db.models import Base
from cinema.infrastructure.external_services.notification_dispatcher import notification_dispatcher
from cinema.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl

# Import all ORM models to ensure relationships are resolved
import cinema.infrastructure.orm  # noqa: F401


logger = logging.getLogger(__name__)


async def seed_reference_data() -> None:
    db = SessionLocal()
    try:
        await SeedReferenceDataUseCase(UnitOfWorkImpl(db)).execute(seed_movies=settings.SEED_SAMPLE_MOVIES)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    setup_logging()
    logger.info("Starting %s %s (%s)", settings.PROJECT_NAME, settings.VERSION, settings.ENVIRONMENT)

    # PostgreSQL schemas come from alembic; SQLite files are created on the fly
    if settings.TESTING or settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    await seed_reference_data()

    yield

    # Shutdown
    await notification_dispatcher.drain()
    logger.info("Shutting down %s", settings.PROJECT_NAME)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    async def health_check():
        """Health check endpoint that verifies database connectivity"""
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            db_status = "healthy"
        except SQLAlchemyError as e:
            logger.error("Database health check failed: %s", e)
            db_status = "unhealthy"
        finally:
            db.close()

        return {
            "status": "healthy" if db_status == "healthy" else "degraded",
            "database": db_status,
            "version": settings.VERSION
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "cinema.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
