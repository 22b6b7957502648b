"""Exercise class selection policy."""

import logging
import random

from ..errors import NoActiveExercisesError
from ..models.exercises import MuscleChain
from ..models.session import WorkoutType
from .rotation import get_paired_workout_type
from .store import WorkoutStore

logger = logging.getLogger(__name__)


async def select_exercise_class(
    store: WorkoutStore,
    muscle_chain: MuscleChain,
    workout_type: WorkoutType,
    rng: random.Random | None = None,
) -> str:
    """Pick the exercise class to train a muscle chain with.

    Classes used for the paired workout type (the other weekly slot of the
    same body region) are avoided so the two sessions alternate movements.
    When every class was used in the paired workout, all classes are
    candidates again.

    Args:
        store: Catalog and progress access
        muscle_chain: Chain being planned
        workout_type: Workout being generated
        rng: Random source; a fresh one is used when omitted

    Returns:
        The chosen exercise class name

    Raises:
        NoActiveExercisesError: if the chain has no active exercises
    """
    exercises = await store.get_active_exercises(muscle_chain)
    exercise_classes = list(dict.fromkeys(e.exercise_class for e in exercises))

    if not exercise_classes:
        raise NoActiveExercisesError(muscle_chain.value)

    if len(exercise_classes) == 1:
        return exercise_classes[0]

    paired_type = get_paired_workout_type(workout_type)
    used_in_paired = set()
    for progress in await store.get_progress(muscle_chain):
        last_used = progress.last_exercise_class_used.get(paired_type)
        if last_used:
            used_in_paired.add(last_used)

    available = [c for c in exercise_classes if c not in used_in_paired]
    if not available:
        logger.debug(
            "All %s classes used in %s, choosing from the full set",
            muscle_chain.value,
            paired_type.value,
        )
        available = exercise_classes

    rng = rng or random.Random()
    return rng.choice(available)
