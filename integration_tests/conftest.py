"""Pytest configuration for integration tests."""

import tempfile
from pathlib import Path

import pytest

from calisthenics_tracker.db import SqliteWorkoutStore, init_db, seed_database


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests/ as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
async def seeded_store():
    """SQLite store seeded with the bundled catalog."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "integration.db"
        await init_db(db_path)
        await seed_database(db_path)
        yield SqliteWorkoutStore(db_path)
