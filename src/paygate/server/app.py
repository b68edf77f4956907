"""FastAPI application for the payment gateway service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from ..application import Application
from ..config import AppConfig
from .routes import router

# Global application instance (set during lifespan)
_application: Optional[Application] = None

logger = logging.getLogger("paygate.server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global _application

    config: AppConfig = app.state.config

    logger.info("Starting paygate service")

    _application = Application(config)
    _application.boot()

    logger.info(f"Default gateway: {_application.gateway().name}")

    yield

    logger.info("Shutting down paygate service")
    _application = None


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Service configuration. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if config is None:
        config = AppConfig.from_env()

    app = FastAPI(
        title="paygate",
        description="Payment gateway service",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan access
    app.state.config = config

    app.include_router(router)

    @app.get("/")
    async def root():
        return {
            "service": "paygate",
            "version": "0.1.0",
            "docs": "/docs",
        }

    return app


def run_server(
    config: Optional[AppConfig] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    log_level: str = "info",
):
    """Run the HTTP server.

    Args:
        config: Service configuration. If None, loads from environment.
        host: Override host from config.
        port: Override port from config.
        log_level: Logging level.
    """
    if config is None:
        config = AppConfig.from_env()

    app = create_app(config)

    uvicorn.run(
        app,
        host=host or config.server.host,
        port=port or config.server.port,
        log_level=log_level,
    )
