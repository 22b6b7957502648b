"""Services built on top of the engine and stores."""

from .catalog import set_exercise_targets
from .history import default_export_filename, export_history_csv, history_rows
from .settings import set_next_workout_type, set_rest_timer

__all__ = [
    "default_export_filename",
    "export_history_csv",
    "history_rows",
    "set_exercise_targets",
    "set_next_workout_type",
    "set_rest_timer",
]
