"""Data models for calisthenics-tracker."""

from .exercises import DIFFICULTY_ORDER, Difficulty, Exercise, MuscleChain
from .progress import AppSettings, MuscleChainProgress
from .session import (
    SET_REP_RANGES,
    EffortRating,
    RepRange,
    SetLog,
    WorkoutSession,
    WorkoutType,
)
from .stretches import Position, Stretch

__all__ = [
    "AppSettings",
    "DIFFICULTY_ORDER",
    "Difficulty",
    "EffortRating",
    "Exercise",
    "MuscleChain",
    "MuscleChainProgress",
    "Position",
    "RepRange",
    "SET_REP_RANGES",
    "SetLog",
    "Stretch",
    "WorkoutSession",
    "WorkoutType",
]
