"""
Main FastAPI application entry point.

Uses Application Factory Pattern; metrics are served by the app itself.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.exc import SQLAlchemyError

from comptoir import __version__
from comptoir.config.settings import Settings, get_settings, override_settings
from comptoir.di.container import initialize_container, shutdown_container
from comptoir.domain.exceptions import ComptoirException
from comptoir.infrastructure.monitoring.logger import get_logger, setup_logging
from comptoir.presentation.api.middleware import (
    comptoir_exception_handler,
    request_validation_exception_handler,
    sqlalchemy_exception_handler,
)
from comptoir.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from comptoir.presentation.api.middleware.rate_limit_middleware import (
    RateLimitMiddleware,
)
from comptoir.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)
from comptoir.presentation.api.routes import (
    analytics,
    auth,
    governance,
    health,
    leaderboard,
    lending,
    staking,
    trading,
)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing). When given it
            replaces the global settings so every layer sees it.

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()
    else:
        override_settings(settings)

    # JSON logs only in production
    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.ENV == "production")
    logger = get_logger(__name__)

    logger.info(f"Creating Comptoir application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Comptoir application...")
        await initialize_container()
        logger.info("Comptoir application started successfully")

        yield

        logger.info("Shutting down Comptoir application...")
        await shutdown_container()
        logger.info("Comptoir application shutdown complete")

    app = FastAPI(
        title="Comptoir API",
        description="Staking, lending, governance and trading ledger",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware chain (last added runs first)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(MetricsMiddleware)

    if settings.RATE_LIMIT_ENABLED:
        app.add_middleware(RateLimitMiddleware)
        logger.info(
            f"Rate limiting enabled ({settings.RATE_LIMIT_REQUESTS} requests "
            f"per {settings.RATE_LIMIT_WINDOW_SECONDS}s)"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(ComptoirException, comptoir_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)

    # Register routes
    app.include_router(health.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(staking.router, prefix="/api")
    app.include_router(lending.router, prefix="/api")
    app.include_router(governance.router, prefix="/api")
    app.include_router(trading.router, prefix="/api")
    app.include_router(analytics.router, prefix="/api")
    app.include_router(leaderboard.router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": "Comptoir",
            "status": "running",
            "version": __version__,
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info("Comptoir application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance (lazy initialization).

    For uvicorn: uvicorn comptoir.main:get_app --factory
    """
    return create_app()


# Created on first access: uvicorn comptoir.main:app
app: Optional[FastAPI] = None


def __getattr__(name: str):
    """Module-level __getattr__ for lazy app initialization."""
    global app
    if name == "app":
        if app is None:
            app = create_app()
        return app
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "comptoir.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
        log_config=None,
    )


if __name__ == "__main__":
    main()
