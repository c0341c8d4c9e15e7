"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from zenreader import __version__
from zenreader.api.routes import health, reader
from zenreader.config import get_settings
from zenreader.logging_config import setup_logging
from zenreader.services.engine import PlaybackEngine
from zenreader.services.tokenizer import SAMPLE_TEXT

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the reader engine for the lifetime of the event loop."""
    settings = get_settings()
    engine = PlaybackEngine.for_running_loop(
        default_wpm=settings.default_wpm,
        min_wpm=settings.min_wpm,
        max_wpm=settings.max_wpm,
    )
    if settings.load_sample_text:
        engine.load(SAMPLE_TEXT)

    app.state.engine = engine
    logger.info("Reader engine started at %d WPM", engine.speed)
    try:
        yield
    finally:
        engine.close()
        app.state.engine = None
        logger.info("Reader engine stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.json_logs)

    app = FastAPI(
        title=settings.app_name,
        description="RSVP Speed-Reading Engine",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid.uuid4())[:8]
        logger.exception("Unhandled exception [%s]: %s", error_id, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "error_id": error_id},
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(reader.router, prefix="/api/reader", tags=["reader"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": f"{settings.app_name} API",
            "version": __version__,
            "docs": "/docs" if settings.debug else None,
        }

    return app


# Default app instance for uvicorn
app = create_app()
