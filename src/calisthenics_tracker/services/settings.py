"""Manual changes to the settings record."""

import logging

from ..engine.store import WorkoutStore
from ..errors import ValidationError
from ..models.progress import AppSettings
from ..models.session import WorkoutType

logger = logging.getLogger(__name__)


async def set_next_workout_type(store: WorkoutStore, workout_type: str) -> AppSettings:
    """Override which workout comes next in the rotation."""
    try:
        new_type = WorkoutType(workout_type)
    except ValueError:
        valid = ", ".join(wt.value for wt in WorkoutType)
        raise ValidationError(f"Unknown workout type {workout_type!r} (expected {valid})") from None

    settings = await store.get_settings()
    await store.update_settings(settings.id, {"current_workout_type": new_type})
    settings.current_workout_type = new_type
    logger.info("Next workout set to %s", new_type.value)
    return settings


async def set_rest_timer(store: WorkoutStore, seconds: int) -> AppSettings:
    """Change the rest timer duration."""
    if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds <= 0:
        raise ValidationError(f"Rest timer must be a positive number of seconds, got {seconds!r}")

    settings = await store.get_settings()
    await store.update_settings(settings.id, {"rest_timer_seconds": seconds})
    settings.rest_timer_seconds = seconds
    return settings
