"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import router as extraction_router
from src.extraction.controller import get_controller, reset_controller

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Creates the drop controller on startup and discards it on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info("Starting PDF Form Extractor API...")
    controller = get_controller()
    logger.info(f"Reset trigger initialized to {controller.state.reset_trigger}")
    yield
    # Shutdown
    logger.info("Shutting down PDF Form Extractor API...")
    reset_controller()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="PDF Form Extractor API",
        description=(
            "Extracts interactive form field values from dropped PDF documents. "
            "Normalizes text, checkbox, radio, dropdown and list fields into a "
            "JSON name/value mapping that host applications read and reset."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(extraction_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "pdf-form-extractor"}

    return application


app = create_app()
