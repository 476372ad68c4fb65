"""FastAPI application factory and configuration.

Host application with lifespan management and the health endpoint. NiceGUI
is mounted onto the instance returned by ``create_app``.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from docdesk import __version__
from docdesk.config import AppConfig, get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config: AppConfig = app.state.config
    logger.info(f"Starting DocDesk against backend {config.api_base_url}")
    yield
    logger.info("Shutting down DocDesk...")


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Application configuration; read from the environment if omitted.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_config()

    application = FastAPI(
        title="DocDesk",
        description="Browser front end for document management and document chat.",
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    application.state.config = config

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "docdesk", "backend": config.api_base_url}

    return application

