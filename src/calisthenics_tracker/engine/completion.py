"""Workout completion and rotation advance."""

import logging

from ..errors import RecordNotFoundError, ValidationError
from ..models.session import EffortRating
from .rotation import get_next_workout_type
from .store import WorkoutStore

logger = logging.getLogger(__name__)


def validate_effort_rating(effort_rating) -> EffortRating:
    """Coerce an effort rating, rejecting anything outside 1-3."""
    if isinstance(effort_rating, bool) or not isinstance(effort_rating, int):
        raise ValidationError(f"Effort rating must be 1, 2 or 3, got {effort_rating!r}")
    try:
        return EffortRating(effort_rating)
    except ValueError:
        raise ValidationError(
            f"Effort rating must be 1, 2 or 3, got {effort_rating!r}"
        ) from None


async def complete_workout(
    store: WorkoutStore,
    session_id: int,
    effort_rating: int,
    stretches_completed: list[int],
) -> None:
    """Mark a session completed and schedule the next workout type.

    The effort rating is stored with the session only; it does not change
    any difficulty tier.

    Raises:
        ValidationError: if the rating is not 1-3 or a stretch id is not an int
        RecordNotFoundError: if the session or settings record is missing
    """
    rating = validate_effort_rating(effort_rating)
    stretch_ids = list(stretches_completed)
    if any(isinstance(s, bool) or not isinstance(s, int) for s in stretch_ids):
        raise ValidationError("Completed stretch ids must be integers")

    session = await store.get_session(session_id)
    if session is None:
        raise RecordNotFoundError("WorkoutSession", session_id)

    await store.update_session(
        session_id,
        {
            "completed": True,
            "effort_rating": rating,
            "stretches_completed": stretch_ids,
        },
    )

    settings = await store.get_settings()
    next_type = get_next_workout_type(settings.current_workout_type)
    await store.update_settings(settings.id, {"current_workout_type": next_type})

    logger.info(
        "Completed workout %s (%s, %s); next up %s",
        session_id,
        session.type.value,
        rating.label,
        next_type.value,
    )
