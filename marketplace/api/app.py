"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.api.middleware.error_handler import ErrorHandlerMiddleware
from marketplace.api.middleware.logging import LoggingMiddleware
from marketplace.api.routes import admin, balances, contracts, health, jobs, profiles
from marketplace.config.database import close_database_connections
from marketplace.config.logging import configure_logging, get_logger
from marketplace.config.settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Application startup", environment=settings.ENVIRONMENT)
    try:
        yield
    finally:
        await close_database_connections()
        logger.info("Application shutdown")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    configure_logging()

    docs_enabled = settings.DEBUG or settings.ENABLE_SWAGGER
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Contracts, jobs and escrowed payments between clients and contractors",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.API_PREFIX}/docs" if docs_enabled else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    # Add routes
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(profiles.router, prefix=settings.API_PREFIX)
    app.include_router(contracts.router, prefix=settings.API_PREFIX)
    app.include_router(jobs.router, prefix=settings.API_PREFIX)
    app.include_router(balances.router, prefix=settings.API_PREFIX)
    app.include_router(admin.router, prefix=settings.API_PREFIX)

    return app
