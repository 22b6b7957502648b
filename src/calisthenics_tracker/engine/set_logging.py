"""Recording performed sets."""

from dataclasses import replace
from datetime import datetime

from ..errors import RecordNotFoundError, ValidationError
from ..models.session import SetLog
from .store import WorkoutStore


async def log_set(
    store: WorkoutStore,
    session_id: int,
    set_index: int,
    actual_reps: int | None,
    weight: float | None = None,
    now: datetime | None = None,
) -> SetLog:
    """Record reps and weight for one set of a session.

    Logging the same set again overwrites the previous values.

    Args:
        store: Session access
        session_id: Session being performed
        set_index: Zero-based index into the session's sets
        actual_reps: Reps performed
        weight: Load used, if any
        now: Completion timestamp (defaults to the current time)

    Returns:
        The updated set
    """
    if actual_reps is not None and actual_reps < 0:
        raise ValidationError("Reps cannot be negative")
    if weight is not None and weight < 0:
        raise ValidationError("Weight cannot be negative")

    session = await store.get_session(session_id)
    if session is None:
        raise RecordNotFoundError("WorkoutSession", session_id)

    if not 0 <= set_index < len(session.sets):
        raise ValidationError(
            f"Set index {set_index} out of range (session has {len(session.sets)} sets)"
        )

    sets = list(session.sets)
    sets[set_index] = replace(
        sets[set_index],
        actual_reps=actual_reps,
        weight=weight,
        completed_at=now or datetime.now(),
    )
    await store.update_session(session_id, {"sets": sets})
    return sets[set_index]
