"""
FastAPI application for the YouTube clipper.
"""

import time
import asyncio
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from clipper.config import config as default_config
from clipper.api.routes import router
from clipper.core.services import ClipperServices
from clipper.utils.error_handling import error_response, register_exception_handlers
from clipper.utils.logger import logging


def create_app(config=None, services: ClipperServices = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Configuration class, defaults to the environment selected one
        services: Pre-built component graph, mainly for tests
    """
    config = config or default_config
    config.initialize()
    services = services or ClipperServices(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        cleanup_task = asyncio.create_task(services.sweeper.run())
        try:
            yield
        finally:
            cleanup_task.cancel()
            with suppress(asyncio.CancelledError):
                await cleanup_task

    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="Fetch video info, find AI highlights and cut downloadable clips",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.services = services

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        """Reject bodies above MAX_BODY_SIZE before they are read."""
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > config.MAX_BODY_SIZE:
            return error_response(413, "Request body too large")
        return await call_next(request)

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    register_exception_handlers(app)

    # Include API router
    app.include_router(router)

    app.mount("/downloads", StaticFiles(directory=config.DOWNLOADS_DIR), name="downloads")
    # Only public/ is exposed at the root so .env and the sources under BASE_DIR are never served
    if config.STATIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="static")
    else:
        logging.debug(f"No static directory at {config.STATIC_DIR}, skipping root mount")

    return app
