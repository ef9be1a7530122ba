"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from wardrobe import __version__
from wardrobe.api.errors import install_error_handlers
from wardrobe.api.routes import debug, health, recommend, sync, wardrobe
from wardrobe.core.config import AppSettings
from wardrobe.model_providers import create_oracle
from wardrobe.persistence import create_persistence
from wardrobe.services import WardrobeServices, build_services


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Construct the client handles once per process, unless already injected."""
    if getattr(app.state, "services", None) is None:
        settings = AppSettings()
        logging.basicConfig(level=settings.log_level)
        object_store, metadata_store = create_persistence(settings)
        app.state.services = build_services(
            settings, object_store, metadata_store, create_oracle(settings),
        )
    yield


def create_app(services: WardrobeServices | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Wardrobe Sync Service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.services = services
    install_error_handlers(app)
    app.include_router(health.router)
    app.include_router(wardrobe.router, prefix="/wardrobe")
    app.include_router(sync.router)
    app.include_router(recommend.router)
    app.include_router(debug.router, prefix="/debug")
    return app
