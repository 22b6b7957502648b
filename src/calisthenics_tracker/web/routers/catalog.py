"""Exercise and stretch catalog routes."""

from fastapi import APIRouter, Form, Request

from ...models.exercises import MuscleChain
from ...models.stretches import Position
from ...services.catalog import set_exercise_targets
from . import get_store

router = APIRouter(tags=["catalog"])


@router.get("/exercises")
async def list_exercises(request: Request, chain: MuscleChain | None = None):
    """List exercises, optionally for one muscle chain."""
    catalog = await get_store(request).exercises.list_all(chain)
    return [{"id": e.id, **e.to_dict()} for e in catalog]


@router.post("/exercises/{exercise_id}/toggle")
async def toggle_exercise(request: Request, exercise_id: int):
    """Activate or deactivate an exercise."""
    exercise = await get_store(request).exercises.toggle_active(exercise_id)
    return {"id": exercise.id, **exercise.to_dict()}


@router.post("/exercises/{exercise_id}/toggle-weight")
async def toggle_exercise_weight(request: Request, exercise_id: int):
    """Toggle whether an exercise needs external weight."""
    exercise = await get_store(request).exercises.toggle_requires_weight(exercise_id)
    return {"id": exercise.id, **exercise.to_dict()}


@router.get("/stretches")
async def list_stretches(request: Request, position: Position | None = None):
    """List stretches, optionally for one position."""
    catalog = await get_store(request).stretches.list_all(position)
    return [{"id": s.id, **s.to_dict()} for s in catalog]


@router.post("/stretches/{stretch_id}/toggle")
async def toggle_stretch(request: Request, stretch_id: int):
    """Activate or deactivate a stretch."""
    stretch = await get_store(request).stretches.toggle_active(stretch_id)
    return {"id": stretch.id, **stretch.to_dict()}


@router.post("/exercises/{exercise_id}/targets")
async def update_exercise_targets(
    request: Request,
    exercise_id: int,
    target_reps: int | None = Form(None),
    target_weight: float | None = Form(None),
):
    """Set target reps and weight; omitted fields are cleared."""
    exercise = await set_exercise_targets(
        get_store(request), exercise_id, target_reps, target_weight
    )
    return {"id": exercise.id, **exercise.to_dict()}
