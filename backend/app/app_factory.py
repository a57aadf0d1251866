"""Application factory.

Builds the FastAPI application around an explicitly created engine. Each
request gets its own session from ``app.state.session_factory`` through
``core.database.get_db``; nothing holds a process-wide connection. Tests pass
their own settings and in-memory engine.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from core.config import Settings, get_settings
from core.database import create_db_engine, create_session_factory, init_db
from core.exceptions import register_exception_handlers
from app.startup import run_startup_checks
from modules.dashboard.routes.dashboard_routes import router as dashboard_router
from modules.menu.routes.menu_routes import router as menu_router
from modules.orders.routes.order_routes import router as order_router
from modules.staff.routes.staff_routes import router as staff_router
from modules.tables.routers.table_router import router as table_router

LOGGER = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def _startup(app: FastAPI) -> None:
    settings: Settings = app.state.settings
    engine: Engine = app.state.engine

    if settings.create_schema_on_startup:
        init_db(engine)
        LOGGER.info("Database schema ensured")

    run_startup_checks(engine, settings)

    if settings.seed_on_startup:
        from scripts.seed_data import seed_database

        db = app.state.session_factory()
        try:
            seed_database(db)
        finally:
            db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    _startup(app)
    yield
    if app.state.owns_engine:
        app.state.engine.dispose()


def create_app(
    settings: Optional[Settings] = None, engine: Optional[Engine] = None
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: configuration; defaults to ``get_settings()``
        engine: database engine to serve from; when omitted one is built
            from ``settings.database_url`` and disposed on shutdown
    """

    settings = settings or get_settings()
    owns_engine = engine is None
    engine = engine or create_db_engine(settings=settings)

    app = FastAPI(
        title=settings.app_title,
        description="Point-of-sale backend for table service: tables, menu, "
                    "staff, orders and the manager dashboard.",
        version=API_VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.owns_engine = owns_engine
    app.state.session_factory = create_session_factory(engine)

    # Register exception handlers for consistent error responses
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(table_router)
    app.include_router(menu_router)
    app.include_router(staff_router)
    app.include_router(order_router)
    app.include_router(dashboard_router)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "environment": settings.environment,
            "version": API_VERSION,
        }

    return app
