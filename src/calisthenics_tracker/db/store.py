"""SQLite-backed implementation of the engine's WorkoutStore."""

import logging
from pathlib import Path

import aiosqlite

from ..engine.store import ProgressStamp, WorkoutStore, apply_patch
from ..errors import RecordNotFoundError
from ..models.exercises import Exercise, MuscleChain
from ..models.progress import AppSettings, MuscleChainProgress
from ..models.session import WorkoutSession
from ..models.stretches import Stretch
from .engine import get_db_path
from .repositories import (
    ExerciseRepository,
    ProgressRepository,
    SessionRepository,
    SettingsRepository,
    StretchRepository,
)

logger = logging.getLogger(__name__)


class SqliteWorkoutStore(WorkoutStore):
    """Groups the per-table repositories behind the WorkoutStore interface."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self.exercises = ExerciseRepository(self.db_path)
        self.stretches = StretchRepository(self.db_path)
        self.progress = ProgressRepository(self.db_path)
        self.settings = SettingsRepository(self.db_path)
        self.sessions = SessionRepository(self.db_path)

    async def get_active_exercises(self, muscle_chain: MuscleChain) -> list[Exercise]:
        return await self.exercises.get_active(muscle_chain)

    async def get_exercises(
        self, muscle_chain: MuscleChain, exercise_class: str
    ) -> list[Exercise]:
        return await self.exercises.get_by_class(muscle_chain, exercise_class)

    async def get_active_stretches(self) -> list[Stretch]:
        return await self.stretches.get_active()

    async def get_progress(self, muscle_chain: MuscleChain) -> list[MuscleChainProgress]:
        return await self.progress.get_by_chain(muscle_chain)

    async def get_class_progress(
        self, muscle_chain: MuscleChain, exercise_class: str
    ) -> MuscleChainProgress | None:
        return await self.progress.get_by_class(muscle_chain, exercise_class)

    async def create_progress(self, progress: MuscleChainProgress) -> int:
        return await self.progress.create(progress)

    async def update_progress(self, progress_id: int, patch: dict) -> None:
        progress = await self.progress.get(progress_id)
        if progress is None:
            raise RecordNotFoundError("MuscleChainProgress", progress_id)
        apply_patch(progress, patch)
        await self.progress.update(progress)

    async def get_settings(self) -> AppSettings:
        settings = await self.settings.get()
        if settings is None:
            raise RecordNotFoundError("AppSettings")
        return settings

    async def update_settings(self, settings_id: int, patch: dict) -> None:
        settings = await self.settings.get()
        if settings is None or settings.id != settings_id:
            raise RecordNotFoundError("AppSettings", settings_id)
        apply_patch(settings, patch)
        await self.settings.update(settings)

    async def create_session(self, session: WorkoutSession) -> int:
        return await self.sessions.create(session)

    async def get_session(self, session_id: int) -> WorkoutSession | None:
        return await self.sessions.get(session_id)

    async def update_session(self, session_id: int, patch: dict) -> None:
        session = await self.sessions.get(session_id)
        if session is None:
            raise RecordNotFoundError("WorkoutSession", session_id)
        apply_patch(session, patch)
        await self.sessions.update(session)

    async def save_generated_workout(
        self, session: WorkoutSession, stamps: list[ProgressStamp]
    ) -> int:
        """Insert the session and apply all stamps in one transaction."""
        async with aiosqlite.connect(self.db_path) as db:
            try:
                session_id = await self.sessions.insert_with(db, session)
                for stamp in stamps:
                    if stamp.progress is not None and stamp.progress.id is not None:
                        # Copy; the caller's record is left untouched
                        progress = MuscleChainProgress.from_dict(
                            stamp.progress.to_dict(), id=stamp.progress.id
                        )
                        progress.stamp(stamp.workout_type, stamp.exercise_class, stamp.date)
                        await self.progress.update_with(db, progress)
                    else:
                        progress = MuscleChainProgress(
                            muscle_chain=stamp.muscle_chain,
                            exercise_class=stamp.exercise_class,
                        )
                        progress.stamp(stamp.workout_type, stamp.exercise_class, stamp.date)
                        await self.progress.insert_with(db, progress)
                        logger.info(
                            "Created progress record for %s / %s",
                            stamp.muscle_chain.value,
                            stamp.exercise_class,
                        )
                await db.commit()
            except Exception:
                await db.rollback()
                raise
        return session_id
