"""CLI commands for calisthenics-tracker."""

from .catalog import exercises, stretch_catalog
from .history import export, history
from .init import init, reset
from .serve import serve
from .settings import settings
from .workout import complete, log_set_cmd, show, start, status, stretches

__all__ = [
    "complete",
    "exercises",
    "export",
    "history",
    "init",
    "log_set_cmd",
    "reset",
    "serve",
    "settings",
    "show",
    "start",
    "status",
    "stretch_catalog",
    "stretches",
]
