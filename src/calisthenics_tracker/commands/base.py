"""Shared CLI utilities."""

import asyncio
import random
from functools import wraps
from pathlib import Path

import click

from ..db import SqliteWorkoutStore, get_db_path
from ..errors import TrackerError
from ..models.session import SET_REP_RANGES, WorkoutSession


def async_command(f):
    """Decorator to run async Click commands.

    Engine errors are reported with echo_error and exit with status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except TrackerError as e:
            echo_error(str(e))
            click.get_current_context().exit(1)

    return wrapper


def get_ctx_db_path(ctx: click.Context) -> Path:
    """Database path for this invocation (honours --data-dir)."""
    data_dir = (ctx.find_root().obj or {}).get("data_dir")
    return get_db_path(data_dir)


def get_store(ctx: click.Context) -> SqliteWorkoutStore:
    """Store bound to this invocation's database."""
    return SqliteWorkoutStore(get_ctx_db_path(ctx))


def make_rng(seed: int | None) -> random.Random:
    """Random source, reproducible when a seed is given."""
    return random.Random(seed)


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_ctx_db_path(ctx)
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'calisthenics init' first."
        )
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip(),
        "".join("-" * w + " " * padding for w in widths).rstrip(),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)


def format_sets(session: WorkoutSession) -> str:
    """Table of a session's sets, numbered from 1."""
    labels = {r.set_number: r.label for r in SET_REP_RANGES}
    rows = []
    for i, set_log in enumerate(session.sets, start=1):
        rows.append([
            str(i),
            set_log.exercise_name,
            f"{labels.get(set_log.set_number, '')} ({set_log.target_rep_range})",
            "" if set_log.actual_reps is None else str(set_log.actual_reps),
            "" if set_log.weight is None else str(set_log.weight),
            "done" if set_log.is_logged else "",
        ])
    return format_table(["#", "Exercise", "Target", "Reps", "Weight", ""], rows)
