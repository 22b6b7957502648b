"""Workout rotation helpers.

The weekly cycle is Upper1 -> Lower1 -> Upper2 -> Lower2. Upper and lower
workouts each cover a fixed set of three muscle chains, and every workout
type is paired with the other slot of the same body region.
"""

from ..models.exercises import MuscleChain
from ..models.session import WorkoutType

UPPER_MUSCLE_CHAINS: list[MuscleChain] = [
    MuscleChain.TRICEPS_PECTORALS,
    MuscleChain.ABDOMINALS_OBLIQUES,
    MuscleChain.BICEPS_SCAPULA,
]

LOWER_MUSCLE_CHAINS: list[MuscleChain] = [
    MuscleChain.QUADS,
    MuscleChain.HAMSTRINGS_CALVES,
    MuscleChain.GLUTES_LUMBAR,
]

WORKOUT_ORDER: list[WorkoutType] = [
    WorkoutType.UPPER1,
    WorkoutType.LOWER1,
    WorkoutType.UPPER2,
    WorkoutType.LOWER2,
]

WORKOUT_CHAINS: dict[WorkoutType, list[MuscleChain]] = {
    WorkoutType.UPPER1: UPPER_MUSCLE_CHAINS,
    WorkoutType.UPPER2: UPPER_MUSCLE_CHAINS,
    WorkoutType.LOWER1: LOWER_MUSCLE_CHAINS,
    WorkoutType.LOWER2: LOWER_MUSCLE_CHAINS,
}

PAIRED_WORKOUT: dict[WorkoutType, WorkoutType] = {
    WorkoutType.UPPER1: WorkoutType.UPPER2,
    WorkoutType.UPPER2: WorkoutType.UPPER1,
    WorkoutType.LOWER1: WorkoutType.LOWER2,
    WorkoutType.LOWER2: WorkoutType.LOWER1,
}


def check_exhaustive(table: dict, enum_cls, name: str) -> None:
    """Raise at import time if a lookup table misses an enum member."""
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


check_exhaustive(WORKOUT_CHAINS, WorkoutType, "WORKOUT_CHAINS")
check_exhaustive(PAIRED_WORKOUT, WorkoutType, "PAIRED_WORKOUT")
check_exhaustive({wt: None for wt in WORKOUT_ORDER}, WorkoutType, "WORKOUT_ORDER")
if set(UPPER_MUSCLE_CHAINS + LOWER_MUSCLE_CHAINS) != set(MuscleChain):
    raise RuntimeError("Upper and lower workouts must cover every muscle chain")


def get_muscle_chains(workout_type: WorkoutType) -> list[MuscleChain]:
    """Muscle chains trained by a workout type, in generation order."""
    return list(WORKOUT_CHAINS[WorkoutType(workout_type)])


def get_next_workout_type(current: WorkoutType) -> WorkoutType:
    """Next slot in the weekly rotation."""
    idx = WORKOUT_ORDER.index(WorkoutType(current))
    return WORKOUT_ORDER[(idx + 1) % len(WORKOUT_ORDER)]


def get_paired_workout_type(workout_type: WorkoutType) -> WorkoutType:
    """The other weekly slot of the same body region."""
    return PAIRED_WORKOUT[WorkoutType(workout_type)]
