"""Exercise definitions and metadata."""

from dataclasses import dataclass
from enum import Enum


class MuscleChain(str, Enum):
    """Anatomical groupings every exercise is tagged with."""

    QUADS = "Quads"
    TRICEPS_PECTORALS = "Triceps & Pectorals"
    ABDOMINALS_OBLIQUES = "Abdominals & Obliques"
    HAMSTRINGS_CALVES = "Hamstrings & Calves"
    BICEPS_SCAPULA = "Biceps & Scapula"
    GLUTES_LUMBAR = "Glutes & Lumbar"


class Difficulty(str, Enum):
    """Six-level difficulty ladder, easiest first."""

    NOVICE = "Novice"
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"
    MASTER = "Master"

    @property
    def index(self) -> int:
        """Position of this tier in DIFFICULTY_ORDER."""
        return DIFFICULTY_ORDER.index(self)


DIFFICULTY_ORDER: list[Difficulty] = list(Difficulty)

DEFAULT_DIFFICULTY = Difficulty.INTERMEDIATE


@dataclass
class Exercise:
    """A single exercise variant within an exercise class."""

    muscle_chain: MuscleChain
    exercise_class: str
    difficulty: Difficulty
    name: str
    target_reps: int | None = None
    target_weight: float | None = None
    requires_weight: bool = False
    active: bool = True
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "muscle_chain": self.muscle_chain.value,
            "exercise_class": self.exercise_class,
            "difficulty": self.difficulty.value,
            "name": self.name,
            "target_reps": self.target_reps,
            "target_weight": self.target_weight,
            "requires_weight": self.requires_weight,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=id,
            muscle_chain=MuscleChain(data["muscle_chain"]),
            exercise_class=data["exercise_class"],
            difficulty=Difficulty(data["difficulty"]),
            name=data["name"],
            target_reps=data.get("target_reps"),
            target_weight=data.get("target_weight"),
            requires_weight=data.get("requires_weight", False),
            active=data.get("active", True),
        )
