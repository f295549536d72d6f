"""
FastAPI Main Application

Entry point for the Jobtrack API server.
Configures routing, middleware, and application lifecycle events.
"""

from typing import Dict, Any
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobtrack.core.config import get_settings
from jobtrack.core.container import init_container, shutdown_container
from jobtrack.api.v1 import jobs_router, health_router
from jobtrack.middleware.error_handler import register_exception_handlers
from jobtrack.middleware.request_context import RequestContextMiddleware
from jobtrack.utils.logger import get_logger

# Initialize logger
logger = get_logger(__name__)

# Get application settings
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Jobtrack API...")

    try:
        await init_container()
        logger.info("Application container initialized successfully")
    except Exception as e:
        logger.error(f"Container initialization failed: {e}")
        raise

    yield

    # Shutdown
    logger.info("Shutting down Jobtrack API...")
    try:
        await shutdown_container()
    except Exception as e:
        logger.warning(f"Error during shutdown: {e}")
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    application = FastAPI(
        title=settings.APP_NAME,
        description="Track job applications: filterable listings and per-user statistics",
        version=settings.VERSION,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
        openapi_url="/api/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins_list(),
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.get_cors_methods_list(),
        allow_headers=settings.get_cors_headers_list(),
    )
    application.add_middleware(RequestContextMiddleware)

    register_exception_handlers(application)

    application.include_router(health_router, prefix="/api/v1")
    application.include_router(jobs_router, prefix="/api/v1")

    @application.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "status": "running",
            "docs_url": "/api/docs" if settings.DEBUG else None,
            "health_url": "/api/v1/health"
        }

    return application


app = create_app()


def run() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "jobtrack.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
