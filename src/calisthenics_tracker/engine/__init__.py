"""Workout generation and progression engine."""

from .completion import complete_workout
from .drop_set import get_drop_set_exercises
from .generator import WorkoutGenerator, generate_workout
from .rotation import get_muscle_chains, get_next_workout_type, get_paired_workout_type
from .selection import select_exercise_class
from .set_logging import log_set
from .store import ProgressStamp, WorkoutStore
from .stretches import StretchRecommender, get_stretches_for_workout

__all__ = [
    "complete_workout",
    "generate_workout",
    "get_drop_set_exercises",
    "get_muscle_chains",
    "get_next_workout_type",
    "get_paired_workout_type",
    "get_stretches_for_workout",
    "log_set",
    "ProgressStamp",
    "select_exercise_class",
    "StretchRecommender",
    "WorkoutGenerator",
    "WorkoutStore",
]
