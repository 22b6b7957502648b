"""Pytest configuration and fixtures."""

import random
import tempfile
from pathlib import Path

import pytest

from calisthenics_tracker.models.progress import MuscleChainProgress
from calisthenics_tracker.models.stretches import Position, Stretch

from factories import InMemoryWorkoutStore, make_catalog


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def temp_data_dir():
    """Create a temporary data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def sample_stretches():
    """A small stretch catalog covering every position."""
    return [
        Stretch("Standing Quad Stretch", Position.STANDING, ["Quadriceps", "Hip Flexors"]),
        Stretch("Doorway Chest Stretch", Position.STANDING, ["Chest", "Shoulders", "Biceps"]),
        Stretch("Wall Calf Stretch", Position.STANDING, ["Calves"]),
        Stretch("Kneeling Hip Flexor Stretch", Position.KNEELING, ["Hip Flexors", "Hips"]),
        Stretch("Supine Hamstring Stretch", Position.LYING_BACK, ["Hamstrings"]),
        Stretch("Cobra", Position.LYING_FRONT, ["Spine", "Back"]),
        Stretch("Seated Forward Fold", Position.SEATED, ["Hamstrings", "Back", "Calves"]),
        Stretch("Seated Neck Stretch", Position.SEATED, ["Neck"]),
    ]


@pytest.fixture
def memory_store(sample_stretches):
    """In-memory store with a full catalog and Intermediate progress rows."""
    exercises = make_catalog()
    pairs = dict.fromkeys((e.muscle_chain, e.exercise_class) for e in exercises)
    progress = [
        MuscleChainProgress(muscle_chain=chain, exercise_class=cls)
        for chain, cls in pairs
    ]
    return InMemoryWorkoutStore(
        exercises=exercises,
        stretches=sample_stretches,
        progress=progress,
    )
