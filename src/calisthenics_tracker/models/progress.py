"""Progression tracking and app settings models."""

from dataclasses import dataclass, field
from datetime import datetime

from ..errors import ValidationError
from .exercises import DEFAULT_DIFFICULTY, Difficulty, MuscleChain
from .session import WorkoutType


def empty_class_usage() -> dict[WorkoutType, str]:
    """Last-used mapping with one empty entry per workout type."""
    return {wt: "" for wt in WorkoutType}


@dataclass
class MuscleChainProgress:
    """Tracks progression for one (muscle chain, exercise class) pair.

    Stores the current difficulty tier along with the exercise class
    last generated for each of the four workout types.
    """

    muscle_chain: MuscleChain
    exercise_class: str
    current_difficulty: Difficulty = DEFAULT_DIFFICULTY
    last_workout_date: datetime | None = None
    last_exercise_class_used: dict[WorkoutType, str] = field(
        default_factory=empty_class_usage
    )
    id: int | None = None

    def __post_init__(self):
        usage = {WorkoutType(k): v for k, v in self.last_exercise_class_used.items()}
        missing = set(WorkoutType) - set(usage)
        if missing:
            names = ", ".join(sorted(wt.value for wt in missing))
            raise ValidationError(f"last_exercise_class_used is missing: {names}")
        self.last_exercise_class_used = usage

    def stamp(self, workout_type: WorkoutType, exercise_class: str, when: datetime) -> None:
        """Record that exercise_class was generated for workout_type."""
        self.last_exercise_class_used[workout_type] = exercise_class
        self.last_workout_date = when

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "muscle_chain": self.muscle_chain.value,
            "exercise_class": self.exercise_class,
            "current_difficulty": self.current_difficulty.value,
            "last_workout_date": (
                self.last_workout_date.isoformat() if self.last_workout_date else None
            ),
            "last_exercise_class_used": {
                wt.value: cls for wt, cls in self.last_exercise_class_used.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "MuscleChainProgress":
        """Create from dictionary."""
        last_workout_date = None
        if data.get("last_workout_date"):
            last_workout_date = datetime.fromisoformat(data["last_workout_date"])

        return cls(
            id=id,
            muscle_chain=MuscleChain(data["muscle_chain"]),
            exercise_class=data["exercise_class"],
            current_difficulty=Difficulty(
                data.get("current_difficulty", DEFAULT_DIFFICULTY.value)
            ),
            last_workout_date=last_workout_date,
            last_exercise_class_used=data.get(
                "last_exercise_class_used", empty_class_usage()
            ),
        )


@dataclass
class AppSettings:
    """Singleton settings record."""

    current_workout_type: WorkoutType = WorkoutType.UPPER1
    rest_timer_seconds: int = 90
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "current_workout_type": self.current_workout_type.value,
            "rest_timer_seconds": self.rest_timer_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "AppSettings":
        """Create from dictionary."""
        return cls(
            id=id,
            current_workout_type=WorkoutType(data.get("current_workout_type", "Upper1")),
            rest_timer_seconds=data.get("rest_timer_seconds", 90),
        )
