"""Test doubles and catalog builders shared across tests."""

import copy

from calisthenics_tracker.engine.store import WorkoutStore, apply_patch
from calisthenics_tracker.errors import RecordNotFoundError
from calisthenics_tracker.models.exercises import (
    DIFFICULTY_ORDER,
    Difficulty,
    Exercise,
    MuscleChain,
)
from calisthenics_tracker.models.progress import AppSettings, MuscleChainProgress
from calisthenics_tracker.models.stretches import Stretch


class InMemoryWorkoutStore(WorkoutStore):
    """Dict-backed WorkoutStore for engine tests.

    Records are deep-copied on the way in and out, like a real database.
    """

    def __init__(self, exercises=None, stretches=None, progress=None, settings=None):
        self.exercises: dict[int, Exercise] = {}
        self.stretches: dict[int, Stretch] = {}
        self.progress: dict[int, MuscleChainProgress] = {}
        self.sessions = {}
        self.settings = settings or AppSettings(id=1)
        self._next_id = 1
        for exercise in exercises or []:
            exercise.id = self._new_id()
            self.exercises[exercise.id] = exercise
        for stretch in stretches or []:
            stretch.id = self._new_id()
            self.stretches[stretch.id] = stretch
        for record in progress or []:
            record.id = self._new_id()
            self.progress[record.id] = record

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    async def get_active_exercises(self, muscle_chain):
        return [
            copy.deepcopy(e) for e in self.exercises.values()
            if e.muscle_chain == muscle_chain and e.active
        ]

    async def get_exercises(self, muscle_chain, exercise_class):
        return [
            copy.deepcopy(e) for e in self.exercises.values()
            if e.muscle_chain == muscle_chain and e.exercise_class == exercise_class
        ]

    async def get_active_stretches(self):
        return [copy.deepcopy(s) for s in self.stretches.values() if s.active]

    async def get_progress(self, muscle_chain):
        return [
            copy.deepcopy(p) for p in self.progress.values()
            if p.muscle_chain == muscle_chain
        ]

    async def get_class_progress(self, muscle_chain, exercise_class):
        for p in self.progress.values():
            if p.muscle_chain == muscle_chain and p.exercise_class == exercise_class:
                return copy.deepcopy(p)
        return None

    async def create_progress(self, progress):
        progress_id = self._new_id()
        stored = copy.deepcopy(progress)
        stored.id = progress_id
        self.progress[progress_id] = stored
        return progress_id

    async def update_progress(self, progress_id, patch):
        if progress_id not in self.progress:
            raise RecordNotFoundError("MuscleChainProgress", progress_id)
        apply_patch(self.progress[progress_id], copy.deepcopy(patch))

    async def get_settings(self):
        return copy.deepcopy(self.settings)

    async def update_settings(self, settings_id, patch):
        if settings_id != self.settings.id:
            raise RecordNotFoundError("AppSettings", settings_id)
        apply_patch(self.settings, copy.deepcopy(patch))

    async def create_session(self, session):
        session_id = self._new_id()
        stored = copy.deepcopy(session)
        stored.id = session_id
        self.sessions[session_id] = stored
        return session_id

    async def get_session(self, session_id):
        session = self.sessions.get(session_id)
        return copy.deepcopy(session) if session else None

    async def update_session(self, session_id, patch):
        if session_id not in self.sessions:
            raise RecordNotFoundError("WorkoutSession", session_id)
        apply_patch(self.sessions[session_id], copy.deepcopy(patch))


def make_class(
    muscle_chain: MuscleChain,
    exercise_class: str,
    difficulties: list[Difficulty] | None = None,
) -> list[Exercise]:
    """One exercise per difficulty tier, named '<class> <tier>'."""
    return [
        Exercise(
            muscle_chain=muscle_chain,
            exercise_class=exercise_class,
            difficulty=difficulty,
            name=f"{exercise_class} {difficulty.value}",
        )
        for difficulty in (difficulties or DIFFICULTY_ORDER)
    ]


def make_catalog() -> list[Exercise]:
    """Two full six-tier classes for every muscle chain."""
    exercises = []
    for chain in MuscleChain:
        short = chain.value.split(" ")[0]
        exercises += make_class(chain, f"{short} A")
        exercises += make_class(chain, f"{short} B")
    return exercises


