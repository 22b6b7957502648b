"""Workout routes: generate, log sets, cooldown, complete, export."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import PlainTextResponse

from ...engine import (
    WorkoutGenerator,
    complete_workout,
    get_stretches_for_workout,
    log_set,
)
from ...errors import RecordNotFoundError
from ...models.session import WorkoutSession
from ...services.history import default_export_filename, export_history_csv
from . import get_store

router = APIRouter(prefix="/workouts", tags=["workouts"])


def session_to_response(session: WorkoutSession) -> dict:
    """Session as JSON, including its ID."""
    return {"id": session.id, **session.to_dict()}


async def load_session(request: Request, session_id: int) -> WorkoutSession:
    session = await get_store(request).get_session(session_id)
    if session is None:
        raise RecordNotFoundError("WorkoutSession", session_id)
    return session


@router.post("", status_code=201)
async def generate(request: Request):
    """Generate the next scheduled workout."""
    store = get_store(request)
    settings = await store.get_settings()
    generator = WorkoutGenerator(store, request.app.state.rng)
    session = await generator.generate(settings.current_workout_type)
    return session_to_response(session)


@router.get("")
async def list_workouts(request: Request, limit: int | None = None):
    """List workouts, newest first."""
    sessions = await get_store(request).sessions.list_all(limit=limit)
    return [session_to_response(s) for s in sessions]


@router.get("/export.csv", response_class=PlainTextResponse)
async def export_csv(request: Request):
    """Download the full set history as CSV."""
    sessions = await get_store(request).sessions.list_all()
    return PlainTextResponse(
        export_history_csv(sessions),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{default_export_filename()}"'
        },
    )


@router.get("/{session_id}")
async def get_workout(request: Request, session_id: int):
    """Get one workout."""
    return session_to_response(await load_session(request, session_id))


@router.post("/{session_id}/sets/{set_index}")
async def record_set(
    request: Request,
    session_id: int,
    set_index: int,
    reps: int = Form(...),
    weight: float | None = Form(None),
):
    """Log reps and weight for a set (zero-based index)."""
    set_log = await log_set(get_store(request), session_id, set_index, reps, weight)
    return set_log.to_dict()


@router.get("/{session_id}/stretches")
async def recommend_stretches(request: Request, session_id: int):
    """Cooldown stretches for a workout's muscle chains."""
    session = await load_session(request, session_id)
    selected = await get_stretches_for_workout(
        get_store(request), session.muscle_chains, request.app.state.rng
    )
    return [{"id": s.id, **s.to_dict()} for s in selected]


@router.post("/{session_id}/complete")
async def complete(
    request: Request,
    session_id: int,
    effort_rating: int = Form(...),
    stretch_ids: list[int] = Form([]),
):
    """Mark a workout completed and advance the rotation."""
    store = get_store(request)
    await complete_workout(store, session_id, effort_rating, stretch_ids)
    settings = await store.get_settings()
    return {
        "status": "completed",
        "session_id": session_id,
        "next_workout_type": settings.current_workout_type.value,
    }
