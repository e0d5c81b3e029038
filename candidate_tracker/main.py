"""FastAPI application entry point.

Configures CORS, structured logging, JSON error handlers, lifespan events,
and router registration.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from candidate_tracker.core.config import settings
from candidate_tracker.core.errors import register_exception_handlers
from candidate_tracker.core.logging import setup_logging
from candidate_tracker.db.store import get_store
from candidate_tracker.routers import candidates, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks."""
    level = setup_logging()
    logger.info("Application starting up", extra={"log_level": level})
    get_store()
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Candidate Tracker API",
    description="Track job candidates: list, add, edit and delete",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(candidates.router, prefix="/api", tags=["Candidates"])
