"""Workout session and set log models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum

from .exercises import MuscleChain


class WorkoutType(str, Enum):
    """The four slots of the weekly rotation."""

    UPPER1 = "Upper1"
    LOWER1 = "Lower1"
    UPPER2 = "Upper2"
    LOWER2 = "Lower2"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Upper #1'."""
        return f"{self.value[:-1]} #{self.value[-1]}"

    @property
    def is_upper(self) -> bool:
        return self in (WorkoutType.UPPER1, WorkoutType.UPPER2)


class EffortRating(IntEnum):
    """How the finished workout felt."""

    TOO_EASY = 1
    TOUGH = 2
    TOO_HARD = 3

    @property
    def label(self) -> str:
        return {
            EffortRating.TOO_EASY: "Too Easy",
            EffortRating.TOUGH: "Tough",
            EffortRating.TOO_HARD: "Too Hard",
        }[self]


@dataclass(frozen=True)
class RepRange:
    """Target rep range attached to a set position."""

    set_number: int
    range: str
    label: str


# Set position -> rep range. Assigned by position in the drop set, never by
# the exercise's own difficulty.
SET_REP_RANGES: list[RepRange] = [
    RepRange(set_number=1, range="5-7", label="Strength"),
    RepRange(set_number=2, range="10-13", label="Growth"),
    RepRange(set_number=3, range="15-20", label="Pump"),
    RepRange(set_number=4, range="20-25", label="Finisher"),
]

SETS_PER_CHAIN = len(SET_REP_RANGES)


def _parse_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


@dataclass
class SetLog:
    """One planned (and eventually performed) set."""

    set_number: int
    target_rep_range: str
    exercise_id: int
    exercise_name: str
    actual_reps: int | None = None
    weight: float | None = None
    completed_at: datetime | None = None

    @property
    def is_logged(self) -> bool:
        return self.completed_at is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "set_number": self.set_number,
            "target_rep_range": self.target_rep_range,
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "actual_reps": self.actual_reps,
            "weight": self.weight,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SetLog":
        """Create from dictionary."""
        return cls(
            set_number=data["set_number"],
            target_rep_range=data["target_rep_range"],
            exercise_id=data["exercise_id"],
            exercise_name=data["exercise_name"],
            actual_reps=data.get("actual_reps"),
            weight=data.get("weight"),
            completed_at=_parse_datetime(data.get("completed_at")),
        )


@dataclass
class WorkoutSession:
    """A generated workout, logged set by set and finally completed.

    Holds four sets per muscle chain (fewer when a chain's exercise pool
    is sparse), in muscle chain order.
    """

    date: datetime
    type: WorkoutType
    muscle_chains: list[MuscleChain]
    sets: list[SetLog] = field(default_factory=list)
    completed: bool = False
    effort_rating: EffortRating | None = None
    stretches_completed: list[int] = field(default_factory=list)
    id: int | None = None

    @property
    def logged_sets(self) -> int:
        """Number of sets with a completion timestamp."""
        return sum(1 for s in self.sets if s.is_logged)

    def next_unlogged_index(self) -> int | None:
        """Index of the first set not yet logged, or None when all are done."""
        for i, set_log in enumerate(self.sets):
            if not set_log.is_logged:
                return i
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "date": self.date.isoformat(),
            "type": self.type.value,
            "muscle_chains": [mc.value for mc in self.muscle_chains],
            "sets": [s.to_dict() for s in self.sets],
            "completed": self.completed,
            "effort_rating": int(self.effort_rating) if self.effort_rating else None,
            "stretches_completed": list(self.stretches_completed),
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "WorkoutSession":
        """Create from dictionary."""
        effort = data.get("effort_rating")
        return cls(
            id=id,
            date=datetime.fromisoformat(data["date"]),
            type=WorkoutType(data["type"]),
            muscle_chains=[MuscleChain(mc) for mc in data["muscle_chains"]],
            sets=[SetLog.from_dict(s) for s in data.get("sets", [])],
            completed=data.get("completed", False),
            effort_rating=EffortRating(effort) if effort else None,
            stretches_completed=list(data.get("stretches_completed", [])),
        )
