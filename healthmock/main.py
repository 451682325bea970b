"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (root, health, catch-all)
- Error handlers (centralized domain-to-HTTP mapping)
- Middleware (CORS, request logging)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthmock.core.config import Settings, settings as default_settings
from healthmock.interfaces.fallback import catch_all
from healthmock.interfaces.health.router import router as health_router
from healthmock.interfaces.root import router as root_router
from healthmock.shared.clock import iso_timestamp
from healthmock.shared.errors.handlers import register_error_handlers
from healthmock.shared.logging import configure_logging
from healthmock.shared.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: announce where the service can be reached."""
    port = app.state.settings.port
    logger.info("Server is running on port %d", port)
    logger.info("Health check available at: http://localhost:%d/health", port)
    logger.info("API documentation at: http://localhost:%d/", port)
    logger.info("Started at: %s", iso_timestamp())
    yield
    logger.info("Server stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to build the app with. Defaults to the
            environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- Middleware ---
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app, settings)

    # --- Routers (catch-all last) ---
    app.include_router(root_router)
    app.include_router(health_router)
    app.router.routes.append(catch_all)

    return app


app = create_app()
