"""Database engine setup, seeding and reset."""

import json
import logging
from pathlib import Path

import aiosqlite

from ..config import get_config
from ..models.exercises import DEFAULT_DIFFICULTY
from ..models.progress import empty_class_usage

logger = logging.getLogger(__name__)

TABLES = ["exercises", "stretches", "workout_sessions", "user_progress", "app_settings"]


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    config = get_config()
    if data_dir is None:
        data_dir = config.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / config.db_name


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Exercise catalog
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                muscle_chain TEXT NOT NULL,
                exercise_class TEXT NOT NULL,
                difficulty TEXT NOT NULL,
                name TEXT NOT NULL,
                target_reps INTEGER,
                target_weight REAL,
                requires_weight INTEGER DEFAULT 0,
                active INTEGER DEFAULT 1
            )
        """)

        # Stretch catalog
        await db.execute("""
            CREATE TABLE IF NOT EXISTS stretches (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                position TEXT NOT NULL,
                muscle_groups TEXT NOT NULL DEFAULT '[]',
                active INTEGER DEFAULT 1
            )
        """)

        # Generated (and logged) workouts
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_sessions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                date TIMESTAMP NOT NULL,
                type TEXT NOT NULL,
                muscle_chains TEXT NOT NULL,
                sets TEXT NOT NULL DEFAULT '[]',
                completed INTEGER DEFAULT 0,
                effort_rating INTEGER,
                stretches_completed TEXT NOT NULL DEFAULT '[]'
            )
        """)

        # Progression per (muscle chain, exercise class)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_progress (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                muscle_chain TEXT NOT NULL,
                exercise_class TEXT NOT NULL,
                current_difficulty TEXT NOT NULL,
                last_workout_date TIMESTAMP,
                last_exercise_class_used TEXT NOT NULL,
                UNIQUE (muscle_chain, exercise_class)
            )
        """)

        # Singleton settings row
        await db.execute("""
            CREATE TABLE IF NOT EXISTS app_settings (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                current_workout_type TEXT NOT NULL,
                rest_timer_seconds INTEGER NOT NULL
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_chain_class
            ON exercises(muscle_chain, exercise_class)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_sessions_date
            ON workout_sessions(date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_user_progress_chain
            ON user_progress(muscle_chain)
        """)

        await db.commit()


async def seed_database(db_path: Path | None = None) -> bool:
    """Populate catalog, settings and progress on first run.

    Does nothing when the exercise table already has rows.

    Returns:
        True if data was seeded
    """
    from ..data.catalog_loader import load_exercises, load_stretches

    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        cursor = await db.execute("SELECT COUNT(*) FROM exercises")
        (count,) = await cursor.fetchone()
        if count:
            return False

        logger.info("Initializing database with default data")

        exercises = load_exercises()
        await db.executemany(
            """
            INSERT INTO exercises
            (muscle_chain, exercise_class, difficulty, name, target_reps,
             target_weight, requires_weight, active)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    e.muscle_chain.value,
                    e.exercise_class,
                    e.difficulty.value,
                    e.name,
                    e.target_reps,
                    e.target_weight,
                    1 if e.requires_weight else 0,
                    1 if e.active else 0,
                )
                for e in exercises
            ],
        )

        await db.executemany(
            """
            INSERT INTO stretches (name, position, muscle_groups, active)
            VALUES (?, ?, ?, ?)
            """,
            [
                (s.name, s.position.value, json.dumps(s.muscle_groups), 1 if s.active else 0)
                for s in load_stretches()
            ],
        )

        await db.execute(
            "INSERT INTO app_settings (current_workout_type, rest_timer_seconds) VALUES (?, ?)",
            ("Upper1", get_config().default_rest_timer_seconds),
        )

        # One progress row per (chain, class) pair with an active exercise
        pairs = list(dict.fromkeys(
            (e.muscle_chain, e.exercise_class) for e in exercises if e.active
        ))
        usage = json.dumps({wt.value: cls for wt, cls in empty_class_usage().items()})
        await db.executemany(
            """
            INSERT INTO user_progress
            (muscle_chain, exercise_class, current_difficulty,
             last_workout_date, last_exercise_class_used)
            VALUES (?, ?, ?, NULL, ?)
            """,
            [
                (chain.value, exercise_class, DEFAULT_DIFFICULTY.value, usage)
                for chain, exercise_class in pairs
            ],
        )

        await db.commit()

    logger.info(
        "Seeded %d exercises and %d progress records", len(exercises), len(pairs)
    )
    return True


async def reset_database(db_path: Path | None = None) -> None:
    """Delete all data (history included) and re-seed the defaults."""
    if db_path is None:
        db_path = get_db_path()

    await init_db(db_path)
    async with aiosqlite.connect(db_path) as db:
        for table in TABLES:
            await db.execute(f"DELETE FROM {table}")
        await db.commit()

    logger.warning("Database %s reset", db_path)
    await seed_database(db_path)
