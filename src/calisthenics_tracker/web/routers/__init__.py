"""API routers."""

from fastapi import Request

from ...db import SqliteWorkoutStore


def get_store(request: Request) -> SqliteWorkoutStore:
    """Get the store from app state."""
    return request.app.state.store
