"""
AdoptMe Backend API Server
Users and pets CRUD over MongoDB, plus mock data generation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adoptme import __version__
from adoptme.api.routes import health, mocks, pets, users
from adoptme.config.settings import Settings, load_settings
from adoptme.database.connection import MongoStore
from adoptme.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

DOCS_URL = "/api-docs"


def create_app(settings: Settings, store=None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Runtime configuration; ``docs_enabled`` mounts the docs
        store: Store handle to use instead of a MongoStore built from settings

    Returns:
        The configured application. Serving it is the caller's job.
    """
    if store is None:
        store = MongoStore.from_settings(settings.validate())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        await store.connect()
        yield
        await store.close()

    app = FastAPI(
        title="AdoptMe API",
        description="API documentation for the users, pets and mocks endpoints",
        version=__version__,
        lifespan=lifespan,
        docs_url=DOCS_URL if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(pets.router, prefix="/api/pets", tags=["Pets"])
    app.include_router(mocks.router, prefix="/api/mocks", tags=["Mocks"])

    logger.info(f"Application created (docs {'at ' + DOCS_URL if settings.docs_enabled else 'disabled'})")
    return app


def create_app_from_env(store: Optional[MongoStore] = None) -> FastAPI:
    """Factory for ``uvicorn adoptme.app:create_app_from_env --factory``"""
    return create_app(load_settings(), store=store)
