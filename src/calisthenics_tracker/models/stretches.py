"""Cooldown stretch definitions."""

from dataclasses import dataclass, field
from enum import Enum


class Position(str, Enum):
    """Body position a stretch is performed in."""

    STANDING = "Standing"
    KNEELING = "Kneeling"
    LYING_BACK = "Lying Back"
    LYING_FRONT = "Lying Front"
    SEATED = "Seated"


# Canonical order used when building a cooldown
POSITION_ORDER: list[Position] = list(Position)


@dataclass
class Stretch:
    """A stretch and the muscle tags it targets."""

    name: str
    position: Position
    muscle_groups: list[str] = field(default_factory=list)
    active: bool = True
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "position": self.position.value,
            "muscle_groups": list(self.muscle_groups),
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Stretch":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            position=Position(data["position"]),
            muscle_groups=list(data.get("muscle_groups", [])),
            active=data.get("active", True),
        )
