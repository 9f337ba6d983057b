"""StaffGrid API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StaffGridError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The RecordStore is built and opened on startup, closed on shutdown,
      and lives on app.state for the whole lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module small
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from staffgrid.api.error_handlers import register_error_handlers
from staffgrid.api.routes import employees, health, users
from staffgrid.config import get_settings
from staffgrid.infrastructure.observability import log_api_requests, setup_logging
from staffgrid.infrastructure.record_store import build_record_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = build_record_store(settings)
    await store.open()
    app.state.record_store = store
    logger.info("StaffGrid API started", extra={"backend": store.backend})
    try:
        yield
    finally:
        await store.close()
        app.state.record_store = None
        logger.info("StaffGrid API shutting down")


app = FastAPI(
    title="StaffGrid API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_api_requests)

app.include_router(health.router)
app.include_router(employees.router)
app.include_router(users.router)

register_error_handlers(app)

# Static files: the built table UI in production
# mounted AFTER API routes so /api/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
