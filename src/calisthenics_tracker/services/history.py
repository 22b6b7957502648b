"""Workout history export."""

import csv
import io
from datetime import date

from ..models.session import WorkoutSession

CSV_HEADERS = ["Date", "Workout Type", "Effort Rating", "Exercise", "Set", "Reps", "Weight"]


def _blank(value) -> str:
    return "" if value is None else str(value)


def history_rows(sessions: list[WorkoutSession]) -> list[list[str]]:
    """One row per set, sessions newest first."""
    ordered = sorted(sessions, key=lambda s: (s.date, s.id or 0), reverse=True)
    rows = []
    for session in ordered:
        effort = session.effort_rating.label if session.effort_rating else ""
        for set_log in session.sets:
            rows.append([
                session.date.date().isoformat(),
                session.type.label,
                effort,
                set_log.exercise_name,
                str(set_log.set_number),
                _blank(set_log.actual_reps),
                _blank(set_log.weight),
            ])
    return rows


def export_history_csv(sessions: list[WorkoutSession]) -> str:
    """Render the raw set history as CSV text."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(history_rows(sessions))
    return buffer.getvalue()


def default_export_filename(today: date | None = None) -> str:
    """File name used when exporting, e.g. workout-history-2024-05-01.csv."""
    today = today or date.today()
    return f"workout-history-{today.isoformat()}.csv"
