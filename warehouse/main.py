"""Warehouse API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WarehouseError → structured JSON responses
    - Database, schema and identity sequences initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Synchronous route functions: FastAPI runs them in its threadpool, and the
      inventory service lock keeps mutation single-writer
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from warehouse import __version__
from warehouse.api.error_handlers import register_error_handlers
from warehouse.api.routes import boxes, health, pallets, reports
from warehouse.config import get_settings
from warehouse.infrastructure.database import init_db
from warehouse.infrastructure.observability import setup_logging
from warehouse.infrastructure.sql_repository import SqlWarehouseRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url, echo=settings.database_echo)
    manager.create_schema()
    SqlWarehouseRepository(manager).reserve_stored_identities()
    logger.info("Warehouse API started")
    yield
    logger.info("Warehouse API shutting down")
    manager.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Warehouse API", version=__version__, lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(pallets.router)
    app.include_router(boxes.router)
    app.include_router(reports.router)
    register_error_handlers(app)
    return app


app = create_app()
