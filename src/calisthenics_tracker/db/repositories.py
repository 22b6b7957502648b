"""Data access layer for calisthenics-tracker."""

import json
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..errors import RecordNotFoundError
from ..models.exercises import Difficulty, Exercise, MuscleChain
from ..models.progress import AppSettings, MuscleChainProgress
from ..models.session import EffortRating, SetLog, WorkoutSession, WorkoutType
from ..models.stretches import Position, Stretch
from .engine import get_db_path


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def list_all(self, muscle_chain: MuscleChain | None = None) -> list[Exercise]:
        """List exercises, optionally for one muscle chain, easiest first per class."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if muscle_chain:
                cursor = await db.execute(
                    "SELECT * FROM exercises WHERE muscle_chain = ? ORDER BY id",
                    (muscle_chain.value,),
                )
            else:
                cursor = await db.execute("SELECT * FROM exercises ORDER BY id")
            rows = await cursor.fetchall()
        exercises = [self._row_to_exercise(row) for row in rows]
        exercises.sort(key=lambda e: (e.muscle_chain.value, e.exercise_class, e.difficulty.index))
        return exercises

    async def get_active(self, muscle_chain: MuscleChain) -> list[Exercise]:
        """Active exercises of a muscle chain, in catalog order."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM exercises
                WHERE muscle_chain = ? AND active = 1
                ORDER BY id
                """,
                (muscle_chain.value,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def get_by_class(
        self, muscle_chain: MuscleChain, exercise_class: str
    ) -> list[Exercise]:
        """All exercises of an exercise class, in catalog order."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM exercises
                WHERE muscle_chain = ? AND exercise_class = ?
                ORDER BY id
                """,
                (muscle_chain.value, exercise_class),
            )
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def add(self, exercise: Exercise) -> int:
        """Add a new exercise."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO exercises
                (muscle_chain, exercise_class, difficulty, name, target_reps,
                 target_weight, requires_weight, active)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    exercise.muscle_chain.value,
                    exercise.exercise_class,
                    exercise.difficulty.value,
                    exercise.name,
                    exercise.target_reps,
                    exercise.target_weight,
                    1 if exercise.requires_weight else 0,
                    1 if exercise.active else 0,
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def update(self, exercise: Exercise) -> None:
        """Update an existing exercise."""
        if exercise.id is None:
            raise ValueError("Exercise must have an ID to update")

        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE exercises SET
                    muscle_chain = ?, exercise_class = ?, difficulty = ?, name = ?,
                    target_reps = ?, target_weight = ?, requires_weight = ?, active = ?
                WHERE id = ?
                """,
                (
                    exercise.muscle_chain.value,
                    exercise.exercise_class,
                    exercise.difficulty.value,
                    exercise.name,
                    exercise.target_reps,
                    exercise.target_weight,
                    1 if exercise.requires_weight else 0,
                    1 if exercise.active else 0,
                    exercise.id,
                ),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise RecordNotFoundError("Exercise", exercise.id)

    async def toggle_active(self, exercise_id: int) -> Exercise:
        """Flip an exercise's active flag."""
        exercise = await self.get(exercise_id)
        if exercise is None:
            raise RecordNotFoundError("Exercise", exercise_id)
        exercise.active = not exercise.active
        await self.update(exercise)
        return exercise

    async def toggle_requires_weight(self, exercise_id: int) -> Exercise:
        """Flip an exercise's requires-weight flag."""
        exercise = await self.get(exercise_id)
        if exercise is None:
            raise RecordNotFoundError("Exercise", exercise_id)
        exercise.requires_weight = not exercise.requires_weight
        await self.update(exercise)
        return exercise

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise(
            id=row["id"],
            muscle_chain=MuscleChain(row["muscle_chain"]),
            exercise_class=row["exercise_class"],
            difficulty=Difficulty(row["difficulty"]),
            name=row["name"],
            target_reps=row["target_reps"],
            target_weight=row["target_weight"],
            requires_weight=bool(row["requires_weight"]),
            active=bool(row["active"]),
        )


class StretchRepository:
    """Repository for the stretch catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, stretch_id: int) -> Stretch | None:
        """Get a stretch by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM stretches WHERE id = ?", (stretch_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_stretch(row)

    async def get_many(self, stretch_ids: list[int]) -> list[Stretch]:
        """Get stretches by ID, skipping unknown IDs."""
        stretches = []
        for stretch_id in stretch_ids:
            stretch = await self.get(stretch_id)
            if stretch is not None:
                stretches.append(stretch)
        return stretches

    async def list_all(self, position: Position | None = None) -> list[Stretch]:
        """List stretches by name, optionally for one position."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if position:
                cursor = await db.execute(
                    "SELECT * FROM stretches WHERE position = ? ORDER BY name",
                    (position.value,),
                )
            else:
                cursor = await db.execute("SELECT * FROM stretches ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_stretch(row) for row in rows]

    async def get_active(self) -> list[Stretch]:
        """All active stretches, in catalog order."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM stretches WHERE active = 1 ORDER BY id"
            )
            rows = await cursor.fetchall()
            return [self._row_to_stretch(row) for row in rows]

    async def add(self, stretch: Stretch) -> int:
        """Add a new stretch."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO stretches (name, position, muscle_groups, active)
                VALUES (?, ?, ?, ?)
                """,
                (
                    stretch.name,
                    stretch.position.value,
                    json.dumps(stretch.muscle_groups),
                    1 if stretch.active else 0,
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def update(self, stretch: Stretch) -> None:
        """Update an existing stretch."""
        if stretch.id is None:
            raise ValueError("Stretch must have an ID to update")

        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE stretches SET
                    name = ?, position = ?, muscle_groups = ?, active = ?
                WHERE id = ?
                """,
                (
                    stretch.name,
                    stretch.position.value,
                    json.dumps(stretch.muscle_groups),
                    1 if stretch.active else 0,
                    stretch.id,
                ),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise RecordNotFoundError("Stretch", stretch.id)

    async def toggle_active(self, stretch_id: int) -> Stretch:
        """Flip a stretch's active flag."""
        stretch = await self.get(stretch_id)
        if stretch is None:
            raise RecordNotFoundError("Stretch", stretch_id)
        stretch.active = not stretch.active
        await self.update(stretch)
        return stretch

    def _row_to_stretch(self, row: aiosqlite.Row) -> Stretch:
        """Convert a database row to a Stretch."""
        return Stretch(
            id=row["id"],
            name=row["name"],
            position=Position(row["position"]),
            muscle_groups=json.loads(row["muscle_groups"]),
            active=bool(row["active"]),
        )


class ProgressRepository:
    """Repository for per (muscle chain, exercise class) progression."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, progress_id: int) -> MuscleChainProgress | None:
        """Get a progress record by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_progress WHERE id = ?", (progress_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_progress(row)

    async def get_by_chain(self, muscle_chain: MuscleChain) -> list[MuscleChainProgress]:
        """All progress records of a muscle chain."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_progress WHERE muscle_chain = ? ORDER BY id",
                (muscle_chain.value,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_progress(row) for row in rows]

    async def get_by_class(
        self, muscle_chain: MuscleChain, exercise_class: str
    ) -> MuscleChainProgress | None:
        """The progress record of one exercise class, if any."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM user_progress
                WHERE muscle_chain = ? AND exercise_class = ?
                """,
                (muscle_chain.value, exercise_class),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_progress(row)

    async def list_all(self) -> list[MuscleChainProgress]:
        """List all progress records."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_progress ORDER BY muscle_chain, exercise_class"
            )
            rows = await cursor.fetchall()
            return [self._row_to_progress(row) for row in rows]

    async def create(self, progress: MuscleChainProgress) -> int:
        """Create a new progress record."""
        async with aiosqlite.connect(self.db_path) as db:
            progress_id = await self.insert_with(db, progress)
            await db.commit()
            return progress_id

    async def update(self, progress: MuscleChainProgress) -> None:
        """Update an existing progress record."""
        if progress.id is None:
            raise ValueError("Progress must have an ID to update")

        async with aiosqlite.connect(self.db_path) as db:
            await self.update_with(db, progress)
            await db.commit()

    async def insert_with(
        self, db: aiosqlite.Connection, progress: MuscleChainProgress
    ) -> int:
        """Insert using an open connection (caller commits)."""
        data = progress.to_dict()
        cursor = await db.execute(
            """
            INSERT INTO user_progress
            (muscle_chain, exercise_class, current_difficulty,
             last_workout_date, last_exercise_class_used)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                data["muscle_chain"],
                data["exercise_class"],
                data["current_difficulty"],
                data["last_workout_date"],
                json.dumps(data["last_exercise_class_used"]),
            ),
        )
        return cursor.lastrowid

    async def update_with(
        self, db: aiosqlite.Connection, progress: MuscleChainProgress
    ) -> None:
        """Update using an open connection (caller commits)."""
        data = progress.to_dict()
        cursor = await db.execute(
            """
            UPDATE user_progress SET
                muscle_chain = ?, exercise_class = ?, current_difficulty = ?,
                last_workout_date = ?, last_exercise_class_used = ?
            WHERE id = ?
            """,
            (
                data["muscle_chain"],
                data["exercise_class"],
                data["current_difficulty"],
                data["last_workout_date"],
                json.dumps(data["last_exercise_class_used"]),
                progress.id,
            ),
        )
        if cursor.rowcount == 0:
            raise RecordNotFoundError("MuscleChainProgress", progress.id)

    def _row_to_progress(self, row: aiosqlite.Row) -> MuscleChainProgress:
        """Convert a database row to a MuscleChainProgress."""
        return MuscleChainProgress.from_dict(
            {
                "muscle_chain": row["muscle_chain"],
                "exercise_class": row["exercise_class"],
                "current_difficulty": row["current_difficulty"],
                "last_workout_date": row["last_workout_date"],
                "last_exercise_class_used": json.loads(row["last_exercise_class_used"]),
            },
            id=row["id"],
        )


class SettingsRepository:
    """Repository for the singleton settings record."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self) -> AppSettings | None:
        """Get the settings record, if seeded."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM app_settings ORDER BY id LIMIT 1")
            row = await cursor.fetchone()
            if row is None:
                return None
            return AppSettings(
                id=row["id"],
                current_workout_type=WorkoutType(row["current_workout_type"]),
                rest_timer_seconds=row["rest_timer_seconds"],
            )

    async def update(self, settings: AppSettings) -> None:
        """Update the settings record."""
        if settings.id is None:
            raise ValueError("Settings must have an ID to update")

        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE app_settings SET
                    current_workout_type = ?, rest_timer_seconds = ?
                WHERE id = ?
                """,
                (
                    settings.current_workout_type.value,
                    settings.rest_timer_seconds,
                    settings.id,
                ),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise RecordNotFoundError("AppSettings", settings.id)


class SessionRepository:
    """Repository for workout sessions."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, session: WorkoutSession) -> int:
        """Create a new session."""
        async with aiosqlite.connect(self.db_path) as db:
            session_id = await self.insert_with(db, session)
            await db.commit()
            return session_id

    async def get(self, session_id: int) -> WorkoutSession | None:
        """Get a session by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_sessions WHERE id = ?", (session_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_session(row)

    async def list_all(self, limit: int | None = None) -> list[WorkoutSession]:
        """List sessions, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if limit:
                cursor = await db.execute(
                    "SELECT * FROM workout_sessions ORDER BY date DESC, id DESC LIMIT ?",
                    (limit,),
                )
            else:
                cursor = await db.execute(
                    "SELECT * FROM workout_sessions ORDER BY date DESC, id DESC"
                )
            rows = await cursor.fetchall()
            return [self._row_to_session(row) for row in rows]

    async def get_latest_incomplete(self) -> WorkoutSession | None:
        """Most recent session not yet completed."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workout_sessions
                WHERE completed = 0
                ORDER BY date DESC, id DESC LIMIT 1
                """
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_session(row)

    async def update(self, session: WorkoutSession) -> None:
        """Update an existing session."""
        if session.id is None:
            raise ValueError("Session must have an ID to update")

        data = session.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE workout_sessions SET
                    date = ?, type = ?, muscle_chains = ?, sets = ?,
                    completed = ?, effort_rating = ?, stretches_completed = ?
                WHERE id = ?
                """,
                (
                    data["date"],
                    data["type"],
                    json.dumps(data["muscle_chains"]),
                    json.dumps(data["sets"]),
                    1 if data["completed"] else 0,
                    data["effort_rating"],
                    json.dumps(data["stretches_completed"]),
                    session.id,
                ),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise RecordNotFoundError("WorkoutSession", session.id)

    async def insert_with(self, db: aiosqlite.Connection, session: WorkoutSession) -> int:
        """Insert using an open connection (caller commits)."""
        data = session.to_dict()
        cursor = await db.execute(
            """
            INSERT INTO workout_sessions
            (date, type, muscle_chains, sets, completed, effort_rating, stretches_completed)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                data["date"],
                data["type"],
                json.dumps(data["muscle_chains"]),
                json.dumps(data["sets"]),
                1 if data["completed"] else 0,
                data["effort_rating"],
                json.dumps(data["stretches_completed"]),
            ),
        )
        return cursor.lastrowid

    def _row_to_session(self, row: aiosqlite.Row) -> WorkoutSession:
        """Convert a database row to a WorkoutSession."""
        effort = row["effort_rating"]
        return WorkoutSession(
            id=row["id"],
            date=datetime.fromisoformat(row["date"]),
            type=WorkoutType(row["type"]),
            muscle_chains=[MuscleChain(mc) for mc in json.loads(row["muscle_chains"])],
            sets=[SetLog.from_dict(s) for s in json.loads(row["sets"])],
            completed=bool(row["completed"]),
            effort_rating=EffortRating(effort) if effort else None,
            stretches_completed=json.loads(row["stretches_completed"]),
        )
