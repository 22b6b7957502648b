"""FastAPI application for the calisthenics-tracker JSON API."""

import logging
import random
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..db import SqliteWorkoutStore, get_db_path, init_db, seed_database
from ..errors import NoActiveExercisesError, RecordNotFoundError, TrackerError, ValidationError
from .routers import catalog, settings, workouts

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    RecordNotFoundError: 404,
    NoActiveExercisesError: 409,
    ValidationError: 422,
}


def create_app(db_path: Path | None = None, rng: random.Random | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    db_path = db_path or get_db_path()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize and seed the database on startup."""
        await init_db(db_path)
        await seed_database(db_path)
        yield

    app = FastAPI(
        title="calisthenics-tracker",
        description="Rotating calisthenics workout generator and log",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.store = SqliteWorkoutStore(db_path)
    app.state.rng = rng or random.Random()

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(request: Request, exc: TrackerError):
        status_code = ERROR_STATUS.get(type(exc), 400)
        logger.info("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    # Include routers
    app.include_router(settings.router)
    app.include_router(workouts.router)
    app.include_router(catalog.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
