"""History listing and CSV export commands."""

import click

from ..services.history import default_export_filename, export_history_csv
from .base import async_command, echo_info, echo_success, ensure_initialized, format_table, get_store


@click.command()
@click.option("--limit", "-n", type=int, default=20, help="Number of workouts to show")
@click.pass_context
@async_command
async def history(ctx: click.Context, limit: int):
    """List past workouts, newest first."""
    ensure_initialized(ctx)
    store = get_store(ctx)

    sessions = await store.sessions.list_all(limit=limit)
    if not sessions:
        echo_info("No workouts yet. Generate one with 'calisthenics start'")
        return

    rows = []
    for session in sessions:
        rows.append([
            str(session.id),
            session.date.strftime("%Y-%m-%d"),
            session.type.label,
            f"{session.logged_sets}/{len(session.sets)}",
            session.effort_rating.label if session.effort_rating else "",
            "yes" if session.completed else "no",
        ])

    click.echo()
    click.echo(format_table(["ID", "Date", "Workout", "Sets", "Effort", "Done"], rows))


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write to this file (default: workout-history-<date>.csv)",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the CSV instead of writing a file")
@click.pass_context
@async_command
async def export(ctx: click.Context, output: str | None, to_stdout: bool):
    """Export every logged set as CSV.

    Examples:
        # Write workout-history-<today>.csv
        calisthenics export

        # Choose the file name
        calisthenics export -o history.csv
    """
    ensure_initialized(ctx)
    store = get_store(ctx)

    sessions = await store.sessions.list_all()
    content = export_history_csv(sessions)

    if to_stdout:
        click.echo(content, nl=False)
        return

    output = output or default_export_filename()
    with open(output, "w", newline="") as f:
        f.write(content)
    echo_success(f"Exported {len(sessions)} workout(s) to {output}")
