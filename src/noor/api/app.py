"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from noor import __version__
from noor.api.dependencies import initialize_app_state, shutdown_app_state
from noor.api.routes import router as api_router
from noor.config import AppConfig

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting Noor...")

    await initialize_app_state(config=getattr(app.state, "config", None))

    logger.info("Noor ready.")

    yield

    logger.info("Shutting down Noor...")
    await shutdown_app_state()


def create_app(config: AppConfig | None = None) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Application configuration (default: from environment)

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Noor",
        description="Prayer times, Qibla direction and Zakat calculation",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config in app state
    app.state.config = config

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(api_router, prefix="/api")

    # Health check
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
