"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api.health_router import router as health_router
from app.api.v1.share_router import router as share_router
from app.core.config import Settings, settings
from app.core.database import (
    build_engine,
    build_session_factory,
    create_tables,
    ensure_sqlite_directory,
)
from app.core.exceptions import (
    AppException,
    app_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)

logger = structlog.get_logger()

VERSION = "0.1.0"


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application with its own database engine."""
    app_settings = app_settings or settings
    engine = build_engine(app_settings.database, echo=app_settings.app.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup and shutdown events."""
        logger.info(
            "Starting application",
            app_name=app_settings.app.name,
            environment=app_settings.app.env,
        )
        ensure_sqlite_directory(app_settings.database)
        if app_settings.app.auto_create_tables:
            await create_tables(engine)
        yield
        await engine.dispose()
        logger.info("Shutting down application")

    app = FastAPI(
        title=app_settings.app.name,
        description="Share chat session transcripts by token",
        version=VERSION,
        lifespan=lifespan,
        debug=app_settings.app.debug,
    )
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Exception handlers
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors.allow_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(share_router)
    return app


app = create_app()


def run() -> None:
    """Serve the application on the configured host and port."""
    logger.info("Serving", bind=settings.server.bind)
    uvicorn.run(
        "app.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
