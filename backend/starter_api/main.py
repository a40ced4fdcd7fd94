"""Starter API — FastAPI application entry point.

Invariants:
    - create_app() builds every collaborator explicitly: error handlers,
      CORS policy, routers (no auto-discovery)
    - CORS and port come from BootstrapConfig (not hardcoded)
    - Database initialized on startup via lifespan context manager and
      disposed on shutdown
    - Interactive docs served at settings.docs_path

Design Decisions:
    - App factory plus module-level `app`: uvicorn and tests import `app`,
      tests needing other settings call create_app(settings)
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from starter_api.api.cors import register_cors
from starter_api.api.error_handlers import register_error_handlers
from starter_api.api.routes import health
from starter_api.config import Settings, get_settings
from starter_api.infrastructure.database import close_db, init_db
from starter_api.infrastructure.observability import setup_logging
from starter_api.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        logger.info(
            f"Starter API started ({settings.environment.value}) "
            f"on port {app.state.bootstrap.port}",
        )
        yield
        await close_db()
        logger.info("Starter API shutting down")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from explicit settings."""
    settings = settings or get_settings()
    config = settings.bootstrap_config()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        docs_url=settings.docs_path,
        lifespan=_build_lifespan(settings),
        responses={400: {"model": ErrorResponse}},
    )
    app.state.settings = settings
    app.state.bootstrap = config

    register_error_handlers(app)
    register_cors(app, config)

    # Routes — explicit registration
    app.include_router(health.router)
    return app


app = create_app()


def run() -> None:
    """Serve `app` on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=app.state.bootstrap.port)
