"""Default exercise and stretch catalog loader."""

import json
import logging
from pathlib import Path

from ..models.exercises import Exercise
from ..models.stretches import Stretch

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent


def get_exercises_json_path() -> Path:
    """Get the path to the bundled exercise catalog."""
    return DATA_DIR / "exercises.json"


def get_stretches_json_path() -> Path:
    """Get the path to the bundled stretch catalog."""
    return DATA_DIR / "stretches.json"


def load_exercises(json_path: Path | None = None) -> list[Exercise]:
    """Load exercises from a catalog JSON file.

    Entries that fail to parse are skipped with a warning.

    Returns:
        List of Exercise objects in file order
    """
    json_path = json_path or get_exercises_json_path()
    with open(json_path) as f:
        data = json.load(f)

    exercises = []
    for ex_data in data.get("exercises", []):
        try:
            exercises.append(Exercise.from_dict(ex_data))
        except (ValueError, KeyError) as e:
            logger.warning(
                "Skipping invalid exercise %s: %s", ex_data.get("name", "unknown"), e
            )
    return exercises


def load_stretches(json_path: Path | None = None) -> list[Stretch]:
    """Load stretches from a catalog JSON file."""
    json_path = json_path or get_stretches_json_path()
    with open(json_path) as f:
        data = json.load(f)

    stretches = []
    for st_data in data.get("stretches", []):
        try:
            stretches.append(Stretch.from_dict(st_data))
        except (ValueError, KeyError) as e:
            logger.warning(
                "Skipping invalid stretch %s: %s", st_data.get("name", "unknown"), e
            )
    return stretches
