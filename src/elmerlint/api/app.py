"""FastAPI application factory for elmerlint."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from elmerlint import __version__
from elmerlint.api.deps import (
    get_validation_service,
    init_validation_service,
    reset_validation_service,
)
from elmerlint.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from elmerlint.api.routers import documents, reference
from elmerlint.api.schemas import HealthResponse
from elmerlint.service.validation_service import ValidationService
from elmerlint.settings import Settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Load the reference dictionary once and drop all findings on shutdown."""
    settings: Settings = app.state.settings
    service = ValidationService.from_settings(settings)
    init_validation_service(service)
    try:
        yield
    finally:
        service.dispose()
        reset_validation_service()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="elmerlint",
        description="Flags unknown keywords in Elmer solver input files.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware)

    app.include_router(documents.router, prefix="/documents", tags=["documents"])
    app.include_router(reference.router, prefix="/reference", tags=["reference"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        service = get_validation_service()
        if service.degraded:
            return HealthResponse(
                status="degraded", version=__version__, dictionary_loaded=False
            )
        return HealthResponse(status="ok", version=__version__)

    return app


def main(settings: Settings | None = None) -> None:
    """Run the REST API server using settings from environment / .env file."""
    if settings is None:
        settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("elmerlint.api")
    logger.info(
        "elmerlint API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        create_app(settings),
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
