"""Exercise catalog edits."""

import logging

from ..db.store import SqliteWorkoutStore
from ..errors import RecordNotFoundError, ValidationError
from ..models.exercises import Exercise

logger = logging.getLogger(__name__)


async def set_exercise_targets(
    store: SqliteWorkoutStore,
    exercise_id: int,
    target_reps: int | None = None,
    target_weight: float | None = None,
) -> Exercise:
    """Set an exercise's target reps and weight; None clears a target."""
    if target_reps is not None and target_reps <= 0:
        raise ValidationError(f"Target reps must be positive, got {target_reps}")
    if target_weight is not None and target_weight < 0:
        raise ValidationError(f"Target weight cannot be negative, got {target_weight}")

    exercise = await store.exercises.get(exercise_id)
    if exercise is None:
        raise RecordNotFoundError("Exercise", exercise_id)

    exercise.target_reps = target_reps
    exercise.target_weight = target_weight
    await store.exercises.update(exercise)
    logger.info("Targets for %s: reps=%s weight=%s", exercise.name, target_reps, target_weight)
    return exercise
