"""Persistence interface consumed by the workout engine."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum

from ..errors import ValidationError
from ..models.exercises import Exercise, MuscleChain
from ..models.progress import AppSettings, MuscleChainProgress
from ..models.session import WorkoutSession, WorkoutType
from ..models.stretches import Stretch


@dataclass
class ProgressStamp:
    """A pending 'last used' update produced by the workout generator."""

    muscle_chain: MuscleChain
    exercise_class: str
    workout_type: WorkoutType
    date: datetime
    progress: MuscleChainProgress | None = None


def apply_patch(record, patch: dict) -> None:
    """Apply a field -> value patch to a model dataclass in place.

    Raw values for enum-typed fields (e.g. "Lower1") are coerced to the
    field's current enum type.

    Raises:
        ValidationError: if the patch names an unknown or read-only field,
            or carries a value its enum field does not accept
    """
    writable = {f.name for f in fields(record)} - {"id"}
    unknown = set(patch) - writable
    if unknown:
        raise ValidationError(
            f"Cannot patch {type(record).__name__}: unknown field(s) {sorted(unknown)}"
        )
    for key, value in patch.items():
        current = getattr(record, key)
        if isinstance(current, Enum) and not isinstance(value, type(current)):
            try:
                value = type(current)(value)
            except ValueError:
                raise ValidationError(
                    f"Invalid {key} for {type(record).__name__}: {value!r}"
                ) from None
        setattr(record, key, value)


class WorkoutStore(ABC):
    """Catalog, progress, settings and session access for the engine.

    Implementations must raise RecordNotFoundError when an update targets
    an id that does not exist.
    """

    # Catalog

    @abstractmethod
    async def get_active_exercises(self, muscle_chain: MuscleChain) -> list[Exercise]:
        ...

    @abstractmethod
    async def get_exercises(
        self, muscle_chain: MuscleChain, exercise_class: str
    ) -> list[Exercise]:
        """All exercises of a class, active or not."""
        ...

    @abstractmethod
    async def get_active_stretches(self) -> list[Stretch]:
        ...

    # Progress

    @abstractmethod
    async def get_progress(self, muscle_chain: MuscleChain) -> list[MuscleChainProgress]:
        ...

    @abstractmethod
    async def get_class_progress(
        self, muscle_chain: MuscleChain, exercise_class: str
    ) -> MuscleChainProgress | None:
        ...

    @abstractmethod
    async def create_progress(self, progress: MuscleChainProgress) -> int:
        ...

    @abstractmethod
    async def update_progress(self, progress_id: int, patch: dict) -> None:
        ...

    # Settings

    @abstractmethod
    async def get_settings(self) -> AppSettings:
        """Return the singleton settings record (RecordNotFoundError if absent)."""
        ...

    @abstractmethod
    async def update_settings(self, settings_id: int, patch: dict) -> None:
        ...

    # Sessions

    @abstractmethod
    async def create_session(self, session: WorkoutSession) -> int:
        ...

    @abstractmethod
    async def get_session(self, session_id: int) -> WorkoutSession | None:
        ...

    @abstractmethod
    async def update_session(self, session_id: int, patch: dict) -> None:
        ...

    async def save_generated_workout(
        self, session: WorkoutSession, stamps: list[ProgressStamp]
    ) -> int:
        """Persist a freshly generated session and its progress stamps.

        The default implementation performs the writes one after another;
        stores that support transactions override this to commit them
        together.
        """
        session_id = await self.create_session(session)
        for stamp in stamps:
            if stamp.progress is None or stamp.progress.id is None:
                progress = stamp.progress or MuscleChainProgress(
                    muscle_chain=stamp.muscle_chain,
                    exercise_class=stamp.exercise_class,
                )
                progress.stamp(stamp.workout_type, stamp.exercise_class, stamp.date)
                progress.id = await self.create_progress(progress)
                continue
            usage = dict(stamp.progress.last_exercise_class_used)
            usage[stamp.workout_type] = stamp.exercise_class
            await self.update_progress(
                stamp.progress.id,
                {"last_exercise_class_used": usage, "last_workout_date": stamp.date},
            )
        return session_id
