"""Products API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map CatalogError → structured JSON responses
    - Database engine created on startup, connectivity checked before serving
      (startup fails fast when unreachable), disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import health, products
from catalog.config import get_settings
from catalog.infrastructure.database import close_db, init_db
from catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    if not await manager.health_check():
        await close_db()
        raise RuntimeError("Database unreachable at startup")
    logger.info("Database connected")
    logger.info("Products API started")
    yield
    logger.info("Products API shutting down")
    await close_db()


app = FastAPI(
    title="Products API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(products.router)

register_error_handlers(app)
