"""Tests for the SQLite layer: schema, seeding, repositories and store."""

import random
from datetime import datetime

import aiosqlite
import pytest

from calisthenics_tracker.data import load_exercises, load_stretches
from calisthenics_tracker.db import (
    SqliteWorkoutStore,
    init_db,
    reset_database,
    seed_database,
)
from calisthenics_tracker.engine import ProgressStamp, WorkoutGenerator, complete_workout, log_set
from calisthenics_tracker.errors import RecordNotFoundError, ValidationError
from calisthenics_tracker.models.exercises import Difficulty, Exercise, MuscleChain
from calisthenics_tracker.models.session import WorkoutSession, WorkoutType
from calisthenics_tracker.models.stretches import Position
from calisthenics_tracker.services.catalog import set_exercise_targets

NOW = datetime(2024, 5, 1, 18, 0)


@pytest.fixture
async def store(temp_db_path):
    """Initialized and seeded SQLite store."""
    await init_db(temp_db_path)
    await seed_database(temp_db_path)
    return SqliteWorkoutStore(temp_db_path)


class TestCatalogData:
    """Tests for the bundled catalog files."""

    def test_exercises_cover_every_chain_and_tier(self):
        exercises = load_exercises()

        for chain in MuscleChain:
            chain_exercises = [e for e in exercises if e.muscle_chain == chain]
            classes = {e.exercise_class for e in chain_exercises}
            assert len(classes) >= 2, chain
            for cls in classes:
                tiers = {e.difficulty for e in chain_exercises if e.exercise_class == cls}
                assert tiers == set(Difficulty), (chain, cls)

    def test_stretches_cover_every_position(self):
        positions = {s.position for s in load_stretches()}
        assert positions == set(Position)

    def test_invalid_entries_skipped(self, tmp_path):
        path = tmp_path / "exercises.json"
        path.write_text(
            '{"exercises": ['
            '{"muscle_chain": "Quads", "exercise_class": "Squat", "difficulty": "Novice", "name": "Box Squat"},'
            '{"muscle_chain": "Neck", "exercise_class": "Bridge", "difficulty": "Novice", "name": "Neck Bridge"}'
            "]}"
        )

        assert [e.name for e in load_exercises(path)] == ["Box Squat"]


class TestSeeding:
    """Tests for seed_database and reset_database."""

    async def test_seed_populates_catalog_settings_and_progress(self, store):
        exercises = await store.exercises.list_all()
        assert len(exercises) == len(load_exercises())

        settings = await store.get_settings()
        assert settings.current_workout_type == WorkoutType.UPPER1
        assert settings.rest_timer_seconds == 90

        progress = await store.progress.list_all()
        pairs = {(e.muscle_chain, e.exercise_class) for e in exercises if e.active}
        assert {(p.muscle_chain, p.exercise_class) for p in progress} == pairs
        assert all(p.current_difficulty == Difficulty.INTERMEDIATE for p in progress)
        assert all(p.last_workout_date is None for p in progress)

    async def test_seed_is_idempotent(self, store, temp_db_path):
        assert await seed_database(temp_db_path) is False
        assert len(await store.exercises.list_all()) == len(load_exercises())

    async def test_reset_deletes_history_and_reseeds(self, store, temp_db_path):
        await WorkoutGenerator(store, random.Random(1)).generate(WorkoutType.UPPER1)
        exercise = (await store.exercises.list_all())[0]
        await store.exercises.toggle_active(exercise.id)

        await reset_database(temp_db_path)

        assert await store.sessions.list_all() == []
        assert all(e.active for e in await store.exercises.list_all())
        assert (await store.get_settings()).current_workout_type == WorkoutType.UPPER1


class TestExerciseRepository:
    """Tests for ExerciseRepository."""

    async def test_list_by_chain_sorted(self, store):
        exercises = await store.exercises.list_all(MuscleChain.QUADS)

        assert {e.muscle_chain for e in exercises} == {MuscleChain.QUADS}
        keys = [(e.exercise_class, e.difficulty.index) for e in exercises]
        assert keys == sorted(keys)

    async def test_toggle_active_hides_from_active_list(self, store):
        exercise = (await store.exercises.list_all(MuscleChain.QUADS))[0]

        toggled = await store.exercises.toggle_active(exercise.id)

        assert toggled.active is False
        active_ids = {e.id for e in await store.get_active_exercises(MuscleChain.QUADS)}
        assert exercise.id not in active_ids
        # Still listed by class
        class_ids = {
            e.id for e in await store.get_exercises(MuscleChain.QUADS, exercise.exercise_class)
        }
        assert exercise.id in class_ids

    async def test_toggle_requires_weight(self, store):
        exercise = (await store.exercises.list_all())[0]

        toggled = await store.exercises.toggle_requires_weight(exercise.id)

        assert toggled.requires_weight is not exercise.requires_weight
        assert (await store.exercises.get(exercise.id)).requires_weight is toggled.requires_weight

    async def test_add_and_get(self, store):
        exercise_id = await store.exercises.add(
            Exercise(MuscleChain.QUADS, "Step-Up", Difficulty.NOVICE, "Low Step-Up")
        )

        loaded = await store.exercises.get(exercise_id)
        assert loaded.name == "Low Step-Up"
        assert loaded.active is True

    async def test_toggle_unknown(self, store):
        with pytest.raises(RecordNotFoundError):
            await store.exercises.toggle_active(99999)


class TestStretchRepository:
    """Tests for StretchRepository."""

    async def test_list_by_position(self, store):
        stretches = await store.stretches.list_all(Position.SEATED)
        assert stretches
        assert {s.position for s in stretches} == {Position.SEATED}

    async def test_toggle_and_get_many(self, store):
        first, second = (await store.stretches.list_all())[:2]

        await store.stretches.toggle_active(first.id)

        active_ids = {s.id for s in await store.get_active_stretches()}
        assert first.id not in active_ids
        fetched = await store.stretches.get_many([first.id, second.id])
        assert [s.id for s in fetched] == [first.id, second.id]


class TestSqliteWorkoutStore:
    """Tests for the WorkoutStore implementation."""

    async def test_generated_session_round_trips(self, store):
        session = await WorkoutGenerator(store, random.Random(2)).generate(
            WorkoutType.LOWER1, now=NOW
        )

        loaded = await store.get_session(session.id)

        assert loaded == session
        assert len(loaded.sets) == 12

    async def test_generation_stamps_progress(self, store):
        session = await WorkoutGenerator(store, random.Random(3)).generate(
            WorkoutType.UPPER2, now=NOW
        )

        exercise = await store.exercises.get(session.sets[0].exercise_id)
        progress = await store.get_class_progress(exercise.muscle_chain, exercise.exercise_class)
        assert progress.last_exercise_class_used[WorkoutType.UPPER2] == exercise.exercise_class
        assert progress.last_workout_date == NOW

    async def test_failed_save_rolls_back(self, store):
        session = WorkoutSession(date=NOW, type=WorkoutType.LOWER1, muscle_chains=[])
        existing = (await store.get_progress(MuscleChain.QUADS))[0]
        stamps = [
            ProgressStamp(
                existing.muscle_chain, existing.exercise_class, WorkoutType.LOWER1, NOW, existing
            ),
            # Duplicate (chain, class) insert violates the unique constraint
            ProgressStamp(existing.muscle_chain, existing.exercise_class, WorkoutType.LOWER1, NOW),
        ]

        with pytest.raises(aiosqlite.IntegrityError):
            await store.save_generated_workout(session, stamps)

        assert await store.sessions.list_all() == []
        reloaded = await store.progress.get(existing.id)
        assert reloaded.last_exercise_class_used[WorkoutType.LOWER1] == ""

    async def test_update_session_patch(self, store):
        session = await WorkoutGenerator(store, random.Random(4)).generate(WorkoutType.UPPER1)

        await store.update_session(session.id, {"completed": True})

        assert (await store.get_session(session.id)).completed is True

    async def test_patch_rejects_unknown_fields(self, store):
        session = await WorkoutGenerator(store, random.Random(5)).generate(WorkoutType.UPPER1)

        with pytest.raises(ValidationError):
            await store.update_session(session.id, {"id": 42})
        with pytest.raises(ValidationError):
            await store.update_session(session.id, {"notes": "felt good"})

    async def test_patch_coerces_enum_values(self, store):
        settings = await store.get_settings()

        await store.update_settings(settings.id, {"current_workout_type": "Lower1"})

        assert (await store.get_settings()).current_workout_type == WorkoutType.LOWER1
        with pytest.raises(ValidationError, match="current_workout_type"):
            await store.update_settings(settings.id, {"current_workout_type": "Arms"})
        assert (await store.get_settings()).current_workout_type == WorkoutType.LOWER1

    async def test_updates_on_missing_records(self, store):
        with pytest.raises(RecordNotFoundError):
            await store.update_session(999, {"completed": True})
        with pytest.raises(RecordNotFoundError):
            await store.update_progress(999, {"current_difficulty": Difficulty.MASTER})
        with pytest.raises(RecordNotFoundError):
            await store.update_settings(999, {"rest_timer_seconds": 60})

    async def test_get_settings_missing(self, temp_db_path):
        await init_db(temp_db_path)

        with pytest.raises(RecordNotFoundError):
            await SqliteWorkoutStore(temp_db_path).get_settings()

    async def test_full_workout_flow(self, store):
        session = await WorkoutGenerator(store, random.Random(6)).generate(WorkoutType.UPPER1)
        await log_set(store, session.id, 0, 6, 10.0)

        await complete_workout(store, session.id, 2, [1, 2])

        loaded = await store.get_session(session.id)
        assert loaded.completed is True
        assert loaded.sets[0].actual_reps == 6
        assert loaded.stretches_completed == [1, 2]
        assert (await store.get_settings()).current_workout_type == WorkoutType.LOWER1
        assert await store.sessions.get_latest_incomplete() is None


class TestExerciseTargets:
    """Tests for set_exercise_targets."""

    async def test_set_and_clear(self, store):
        exercise = (await store.exercises.list_all())[0]

        updated = await set_exercise_targets(store, exercise.id, 12, 5.0)
        assert (updated.target_reps, updated.target_weight) == (12, 5.0)

        cleared = await set_exercise_targets(store, exercise.id)
        loaded = await store.exercises.get(exercise.id)
        assert cleared.target_reps is None
        assert (loaded.target_reps, loaded.target_weight) == (None, None)

    async def test_invalid_targets(self, store):
        with pytest.raises(ValidationError):
            await set_exercise_targets(store, 1, 0)
        with pytest.raises(ValidationError):
            await set_exercise_targets(store, 1, 10, -1.0)

    async def test_unknown_exercise(self, store):
        with pytest.raises(RecordNotFoundError):
            await set_exercise_targets(store, 99999, 10)
