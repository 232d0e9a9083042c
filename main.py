import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from jobboard.core.config import settings
from jobboard.core.database import init_db
from jobboard.core.errors import register_error_handlers
from jobboard.core.logging_config import RequestLogMiddleware, setup_logging
from jobboard.api.endpoints import auth, companies, health, jobs

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
    logger.info("Starting up Job Board API...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Job Board API...")


def create_app() -> FastAPI:
    """Build the application with its own router instances."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Jobs and companies REST API",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    register_error_handlers(app)

    app.include_router(health.create_router())
    app.include_router(auth.create_router(), prefix=settings.API_PREFIX)
    app.include_router(companies.create_router(), prefix=settings.API_PREFIX)
    app.include_router(jobs.create_router(), prefix=settings.API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
