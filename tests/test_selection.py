"""Tests for exercise class selection."""

import random

import pytest

from calisthenics_tracker.engine.selection import select_exercise_class
from calisthenics_tracker.errors import NoActiveExercisesError
from calisthenics_tracker.models.exercises import MuscleChain
from calisthenics_tracker.models.progress import MuscleChainProgress
from calisthenics_tracker.models.session import WorkoutType

from factories import InMemoryWorkoutStore, make_class


class RecordingRandom(random.Random):
    """Random that records the sequences passed to choice()."""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.choices = []

    def choice(self, seq):
        self.choices.append(list(seq))
        return super().choice(seq)


def store_with_classes(*classes, used_in=None):
    """Store for the Quads chain with the given classes.

    used_in maps a workout type to the class last used for it.
    """
    exercises = []
    for cls in classes:
        exercises += make_class(MuscleChain.QUADS, cls)
    progress = []
    for cls in classes:
        record = MuscleChainProgress(MuscleChain.QUADS, cls)
        for workout_type, used in (used_in or {}).items():
            if used == cls:
                record.last_exercise_class_used[workout_type] = cls
        progress.append(record)
    return InMemoryWorkoutStore(exercises=exercises, progress=progress)


class TestSelectExerciseClass:
    """Tests for select_exercise_class."""

    async def test_avoids_class_used_in_paired_workout(self):
        store = store_with_classes("Squat", "Lunge", used_in={WorkoutType.LOWER2: "Squat"})

        for seed in range(20):
            chosen = await select_exercise_class(
                store, MuscleChain.QUADS, WorkoutType.LOWER1, random.Random(seed)
            )
            assert chosen == "Lunge"

    async def test_unpaired_usage_is_ignored(self):
        # Lower1 usage does not restrict Lower1 itself
        store = store_with_classes("Squat", "Lunge", used_in={WorkoutType.LOWER1: "Squat"})
        rng = RecordingRandom()

        await select_exercise_class(store, MuscleChain.QUADS, WorkoutType.LOWER1, rng)

        assert rng.choices == [["Squat", "Lunge"]]

    async def test_falls_back_to_all_classes(self):
        store = store_with_classes("Squat", "Lunge")
        for record in store.progress.values():
            record.last_exercise_class_used[WorkoutType.UPPER2] = record.exercise_class
        rng = RecordingRandom()

        await select_exercise_class(store, MuscleChain.QUADS, WorkoutType.UPPER1, rng)

        assert rng.choices == [["Squat", "Lunge"]]

    async def test_single_class_skips_randomness(self):
        store = store_with_classes("Squat", used_in={WorkoutType.LOWER2: "Squat"})
        rng = RecordingRandom()

        chosen = await select_exercise_class(
            store, MuscleChain.QUADS, WorkoutType.LOWER1, rng
        )

        assert chosen == "Squat"
        assert rng.choices == []

    async def test_inactive_class_not_considered(self):
        store = store_with_classes("Squat", "Lunge")
        for exercise in store.exercises.values():
            if exercise.exercise_class == "Lunge":
                exercise.active = False

        chosen = await select_exercise_class(store, MuscleChain.QUADS, WorkoutType.LOWER1)

        assert chosen == "Squat"

    async def test_no_active_exercises(self):
        store = store_with_classes("Squat")
        for exercise in store.exercises.values():
            exercise.active = False

        with pytest.raises(NoActiveExercisesError, match="Quads"):
            await select_exercise_class(store, MuscleChain.QUADS, WorkoutType.LOWER1)

    async def test_candidates_keep_catalog_order(self):
        store = store_with_classes("Squat", "Lunge", "Step-Up")
        rng = RecordingRandom()

        await select_exercise_class(store, MuscleChain.QUADS, WorkoutType.LOWER2, rng)

        assert rng.choices == [["Squat", "Lunge", "Step-Up"]]
