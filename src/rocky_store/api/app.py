"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rocky_store.api.middleware.error_handler import register_error_handlers
from rocky_store.api.routes import data, health
from rocky_store.core.config import AppSettings
from rocky_store.core.startup_checks import validate_settings
from rocky_store.hooks import setup_logging
from rocky_store.services.data_service import RockyDataService


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("rocky-store")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def create_app(
    settings: AppSettings | None = None,
    service: RockyDataService | None = None,
    *,
    configure_logging: bool = True,
) -> FastAPI:
    """Build the API app. ``settings`` and ``service`` are resolved at startup if omitted."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application startup/shutdown lifecycle."""
        resolved = settings or AppSettings()
        validate_settings(resolved)
        data_service = service or RockyDataService.from_settings(resolved)
        if configure_logging:
            setup_logging(resolved.observability, debug_log=data_service.debug_log)

        app.state.settings = resolved
        app.state.data_service = data_service
        yield

    api_config = (settings or AppSettings()).api

    app = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(data.router, prefix="/api")
    return app
