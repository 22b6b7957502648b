"""Database layer for calisthenics-tracker."""

from .engine import get_db_path, init_db, reset_database, seed_database
from .repositories import (
    ExerciseRepository,
    ProgressRepository,
    SessionRepository,
    SettingsRepository,
    StretchRepository,
)
from .store import SqliteWorkoutStore

__all__ = [
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "ProgressRepository",
    "reset_database",
    "seed_database",
    "SessionRepository",
    "SettingsRepository",
    "SqliteWorkoutStore",
    "StretchRepository",
]
