"""Tests for workout generation."""

import random
from datetime import datetime

import pytest

from calisthenics_tracker.engine.generator import WorkoutGenerator, generate_workout
from calisthenics_tracker.engine.rotation import get_muscle_chains
from calisthenics_tracker.errors import NoActiveExercisesError
from calisthenics_tracker.models.exercises import Difficulty, MuscleChain
from calisthenics_tracker.models.session import SET_REP_RANGES, WorkoutType

NOW = datetime(2024, 5, 1, 18, 0)


class TestGenerate:
    """Tests for WorkoutGenerator.generate."""

    @pytest.mark.parametrize("workout_type", list(WorkoutType))
    async def test_four_sets_per_chain(self, memory_store, workout_type):
        generator = WorkoutGenerator(memory_store, random.Random(1))

        session = await generator.generate(workout_type, now=NOW)

        assert session.id is not None
        assert session.type == workout_type
        assert session.muscle_chains == get_muscle_chains(workout_type)
        assert len(session.sets) == 4 * len(session.muscle_chains)
        assert session.completed is False
        assert session.effort_rating is None
        assert session.stretches_completed == []

    async def test_sets_are_unlogged_with_positional_rep_ranges(self, memory_store):
        session = await generate_workout(memory_store, WorkoutType.UPPER1, random.Random(2))

        for i, set_log in enumerate(session.sets):
            expected = SET_REP_RANGES[i % 4]
            assert set_log.set_number == expected.set_number
            assert set_log.target_rep_range == expected.range
            assert set_log.actual_reps is None
            assert set_log.weight is None
            assert set_log.completed_at is None

    async def test_drop_set_starts_at_current_difficulty(self, memory_store):
        for record in memory_store.progress.values():
            if record.muscle_chain == MuscleChain.QUADS:
                record.current_difficulty = Difficulty.MASTER

        session = await WorkoutGenerator(memory_store, random.Random(3)).generate(
            WorkoutType.LOWER1, now=NOW
        )

        quads = session.sets[:4]
        difficulties = [memory_store.exercises[s.exercise_id].difficulty for s in quads]
        assert difficulties == [
            Difficulty.MASTER, Difficulty.EXPERT, Difficulty.ADVANCED, Difficulty.INTERMEDIATE,
        ]
        classes = {memory_store.exercises[s.exercise_id].exercise_class for s in quads}
        assert len(classes) == 1

    async def test_one_class_per_chain(self, memory_store):
        session = await WorkoutGenerator(memory_store, random.Random(4)).generate(
            WorkoutType.UPPER2, now=NOW
        )

        for i, chain in enumerate(session.muscle_chains):
            chunk = session.sets[i * 4:(i + 1) * 4]
            exercises = [memory_store.exercises[s.exercise_id] for s in chunk]
            assert {e.muscle_chain for e in exercises} == {chain}
            assert len({e.exercise_class for e in exercises}) == 1
            assert len({e.id for e in exercises}) == 4

    async def test_stamps_last_used_class(self, memory_store):
        session = await WorkoutGenerator(memory_store, random.Random(5)).generate(
            WorkoutType.UPPER1, now=NOW
        )

        for i, chain in enumerate(session.muscle_chains):
            chosen = memory_store.exercises[session.sets[i * 4].exercise_id].exercise_class
            record = await memory_store.get_class_progress(chain, chosen)
            assert record.last_exercise_class_used[WorkoutType.UPPER1] == chosen
            assert record.last_workout_date == NOW

    async def test_paired_workout_uses_other_class(self, memory_store):
        generator = WorkoutGenerator(memory_store, random.Random(6))
        first = await generator.generate(WorkoutType.UPPER1, now=NOW)
        second = await generator.generate(WorkoutType.UPPER2, now=NOW)

        for i in range(3):
            first_class = memory_store.exercises[first.sets[i * 4].exercise_id].exercise_class
            second_class = memory_store.exercises[second.sets[i * 4].exercise_id].exercise_class
            assert first_class != second_class

    async def test_missing_progress_defaults_to_intermediate(self, memory_store):
        memory_store.progress.clear()

        session = await WorkoutGenerator(memory_store, random.Random(7)).generate(
            WorkoutType.LOWER2, now=NOW
        )

        first = memory_store.exercises[session.sets[0].exercise_id]
        assert first.difficulty == Difficulty.INTERMEDIATE
        # A record was created for each chosen class
        assert len(memory_store.progress) == 3

    async def test_failure_leaves_store_untouched(self, memory_store):
        for exercise in memory_store.exercises.values():
            if exercise.muscle_chain == MuscleChain.BICEPS_SCAPULA:
                exercise.active = False
        before = {pid: p.to_dict() for pid, p in memory_store.progress.items()}

        with pytest.raises(NoActiveExercisesError, match="Biceps & Scapula"):
            await WorkoutGenerator(memory_store, random.Random(8)).generate(
                WorkoutType.UPPER1, now=NOW
            )

        assert memory_store.sessions == {}
        assert {pid: p.to_dict() for pid, p in memory_store.progress.items()} == before

    async def test_same_seed_same_workout(self, memory_store):
        first = await WorkoutGenerator(memory_store, random.Random(9)).plan_chain(
            MuscleChain.QUADS, WorkoutType.LOWER1, NOW
        )
        second = await WorkoutGenerator(memory_store, random.Random(9)).plan_chain(
            MuscleChain.QUADS, WorkoutType.LOWER1, NOW
        )

        assert first[0] == second[0]
