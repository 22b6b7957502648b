"""Workout generation."""

import logging
import random
from dataclasses import dataclass
from datetime import datetime

from ..errors import NoActiveExercisesError
from ..models.exercises import DEFAULT_DIFFICULTY, Difficulty, Exercise, MuscleChain
from ..models.session import SET_REP_RANGES, SetLog, WorkoutSession, WorkoutType
from .drop_set import get_drop_set_exercises
from .rotation import get_muscle_chains
from .selection import select_exercise_class
from .store import ProgressStamp, WorkoutStore

logger = logging.getLogger(__name__)


@dataclass
class ChainPlan:
    """Planned drop set for one muscle chain."""

    muscle_chain: MuscleChain
    exercise_class: str
    difficulty: Difficulty
    exercises: list[Exercise]

    def to_sets(self) -> list[SetLog]:
        """One set per exercise, labelled by position in the drop set."""
        return [
            SetLog(
                set_number=rep_range.set_number,
                target_rep_range=rep_range.range,
                exercise_id=exercise.id,
                exercise_name=exercise.name,
            )
            for rep_range, exercise in zip(SET_REP_RANGES, self.exercises)
        ]


class WorkoutGenerator:
    """Builds and persists workout sessions.

    Generation runs in two phases. Every muscle chain is planned first using
    reads only, so a failure on any chain leaves the store untouched. The new
    session and the per-class progress stamps are then written together via
    WorkoutStore.save_generated_workout.
    """

    def __init__(self, store: WorkoutStore, rng: random.Random | None = None):
        self.store = store
        self.rng = rng or random.Random()

    async def plan_chain(
        self, muscle_chain: MuscleChain, workout_type: WorkoutType, date: datetime
    ) -> tuple[ChainPlan, ProgressStamp]:
        """Select a class and build the drop set for one muscle chain."""
        exercise_class = await select_exercise_class(
            self.store, muscle_chain, workout_type, self.rng
        )

        progress = await self.store.get_class_progress(muscle_chain, exercise_class)
        difficulty = progress.current_difficulty if progress else DEFAULT_DIFFICULTY

        exercises = await self.store.get_exercises(muscle_chain, exercise_class)
        drop_set = get_drop_set_exercises(exercises, difficulty)
        if not drop_set:
            raise NoActiveExercisesError(muscle_chain.value, exercise_class)

        logger.debug(
            "%s: %s at %s -> %s",
            muscle_chain.value,
            exercise_class,
            difficulty.value,
            [e.name for e in drop_set],
        )

        plan = ChainPlan(
            muscle_chain=muscle_chain,
            exercise_class=exercise_class,
            difficulty=difficulty,
            exercises=drop_set,
        )
        stamp = ProgressStamp(
            muscle_chain=muscle_chain,
            exercise_class=exercise_class,
            workout_type=workout_type,
            date=date,
            progress=progress,
        )
        return plan, stamp

    async def generate(
        self, workout_type: WorkoutType, now: datetime | None = None
    ) -> WorkoutSession:
        """Generate, persist and return a new session for workout_type.

        Raises:
            NoActiveExercisesError: if any muscle chain cannot be planned
        """
        workout_type = WorkoutType(workout_type)
        muscle_chains = get_muscle_chains(workout_type)
        date = now or datetime.now()

        sets: list[SetLog] = []
        stamps: list[ProgressStamp] = []
        for muscle_chain in muscle_chains:
            plan, stamp = await self.plan_chain(muscle_chain, workout_type, date)
            sets.extend(plan.to_sets())
            stamps.append(stamp)

        session = WorkoutSession(
            date=date,
            type=workout_type,
            muscle_chains=muscle_chains,
            sets=sets,
        )
        session.id = await self.store.save_generated_workout(session, stamps)

        logger.info(
            "Generated %s workout %s with %d sets",
            workout_type.value,
            session.id,
            len(sets),
        )
        return session


async def generate_workout(
    store: WorkoutStore,
    workout_type: WorkoutType,
    rng: random.Random | None = None,
) -> WorkoutSession:
    """Generate and persist a workout session for workout_type."""
    return await WorkoutGenerator(store, rng).generate(workout_type)
