"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from official_status.main.config import AppSettings, get_settings
from official_status.main.container import init_container
from official_status.presentation.controllers import status_router
from official_status.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log application start and stop."""
    logger.info("app.startup")
    yield
    logger.info("app.shutdown")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Optional settings override; loaded from the environment
            when omitted.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()
    update_logging_from_settings(settings)

    container = init_container(settings)

    app = FastAPI(
        title=settings.app.title,
        description=settings.app.description,
        version=settings.app.version,
        lifespan=lifespan,
    )
    app.state.container = container
    app.include_router(status_router)

    return app


def main() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    configure_logging()
    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.app.port)
