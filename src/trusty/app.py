"""Trusty application factory.

Builds the FastAPI application, wires the directory store and decision
engine once per process, and registers routers and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .config import TrustySettings, get_settings
from .database import DatabaseManager
from .features.access.entities import DirectoryStore
from .features.access.routers import router as access_router
from .features.access.services import create_decision_engine
from .features.directory import AsyncPGDirectoryStore
from .features.system.routers import router as system_router
from .middleware import register_exception_handlers


def _build_lifespan(settings: TrustySettings):
    """Create the lifespan handler that owns the database pool."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = DatabaseManager(
            settings.database_dsn,
            application_name=settings.app_name,
            **settings.get_pool_config()
        )
        try:
            await database.create_pool()
        except Exception as e:
            logger.error(f"Failed to connect to the directory database: {e}")
            raise

        store = AsyncPGDirectoryStore(database, schema=settings.database_schema)
        app.state.directory_store = store
        app.state.decision_engine = create_decision_engine(store)
        logger.info(f"Directory store ready (schema={settings.database_schema})")

        try:
            yield
        finally:
            await database.close_pool()

    return lifespan


def create_app(
    settings: Optional[TrustySettings] = None,
    store: Optional[DirectoryStore] = None
) -> FastAPI:
    """Create the trusty API.

    Args:
        settings: Optional settings, defaults to environment settings
        store: Optional directory store; when given, no database pool is
            created and the engine is wired immediately

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Trusty",
        version=settings.app_version,
        description="Role-based access-control decisions for multi-tenant services",
        debug=settings.debug,
        lifespan=None if store is not None else _build_lifespan(settings),
    )

    if store is not None:
        app.state.directory_store = store
        app.state.decision_engine = create_decision_engine(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "DELETE", "PATCH"],
        allow_headers=["User-Agent", "Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    app.include_router(system_router, tags=["System"])
    app.include_router(access_router, prefix="/v1", tags=["Access"])

    logger.info(f"Created {settings.app_name} API ({settings.environment})")
    return app
