"""Workout commands: status, start, show, log, stretches, complete."""

import click

from ..engine import (
    WorkoutGenerator,
    complete_workout,
    get_muscle_chains,
    get_stretches_for_workout,
    log_set,
)
from ..errors import RecordNotFoundError
from ..models.session import EffortRating
from .base import (
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_sets,
    format_table,
    get_store,
    make_rng,
)


async def _load_session(store, session_id: int):
    session = await store.get_session(session_id)
    if session is None:
        raise RecordNotFoundError("WorkoutSession", session_id)
    return session


@click.command()
@click.pass_context
@async_command
async def status(ctx: click.Context):
    """Show the next scheduled workout and any workout in progress."""
    ensure_initialized(ctx)
    store = get_store(ctx)

    settings = await store.get_settings()
    workout_type = settings.current_workout_type

    click.echo()
    click.echo(click.style(f"Next workout: {workout_type.label}", bold=True))
    click.echo("  " + " / ".join(mc.value for mc in get_muscle_chains(workout_type)))
    click.echo(f"Rest timer: {settings.rest_timer_seconds}s")

    in_progress = await store.sessions.get_latest_incomplete()
    if in_progress:
        click.echo()
        echo_info(
            f"Workout {in_progress.id} ({in_progress.type.label}) in progress: "
            f"{in_progress.logged_sets}/{len(in_progress.sets)} sets logged"
        )


@click.command()
@click.option("--seed", type=int, help="Seed the random choices (for reproducible output)")
@click.pass_context
@async_command
async def start(ctx: click.Context, seed: int | None):
    """Generate the next scheduled workout.

    Picks an exercise class per muscle chain and builds a four-set drop set
    for each, from the current difficulty downwards.
    """
    ensure_initialized(ctx)
    store = get_store(ctx)

    settings = await store.get_settings()
    generator = WorkoutGenerator(store, make_rng(seed))
    session = await generator.generate(settings.current_workout_type)

    echo_success(f"Generated {session.type.label} workout (ID: {session.id})")
    click.echo()
    click.echo(format_sets(session))
    click.echo()
    click.echo(f"Log sets with: calisthenics log {session.id} <set #> --reps N")


@click.command()
@click.argument("session_id", type=int)
@click.pass_context
@async_command
async def show(ctx: click.Context, session_id: int):
    """Show a workout and its logged sets."""
    ensure_initialized(ctx)
    session = await _load_session(get_store(ctx), session_id)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"{session.type.label} - {session.date.strftime('%Y-%m-%d %H:%M')} (ID: {session.id})")
    click.echo("=" * 60)
    click.echo(" / ".join(mc.value for mc in session.muscle_chains))
    click.echo()
    click.echo(format_sets(session))
    click.echo()
    if session.completed:
        effort = session.effort_rating.label if session.effort_rating else "-"
        click.echo(f"Completed. Effort: {effort}")
        done = await get_store(ctx).stretches.get_many(session.stretches_completed)
        if done:
            click.echo("Stretches done: " + ", ".join(s.name for s in done))
    else:
        click.echo(f"In progress: {session.logged_sets}/{len(session.sets)} sets logged")


@click.command(name="log")
@click.argument("session_id", type=int)
@click.argument("set_number", type=int)
@click.option("--reps", "-r", type=int, required=True, help="Reps performed")
@click.option("--weight", "-w", type=float, help="Added weight used")
@click.pass_context
@async_command
async def log_set_cmd(
    ctx: click.Context, session_id: int, set_number: int, reps: int, weight: float | None
):
    """Record reps (and weight) for set SET_NUMBER of a workout.

    Sets are numbered from 1 in the order shown by 'calisthenics show'.
    """
    ensure_initialized(ctx)
    store = get_store(ctx)

    set_log = await log_set(store, session_id, set_number - 1, reps, weight)
    weight_text = f" @ {set_log.weight}" if set_log.weight is not None else ""
    echo_success(f"Set {set_number}: {set_log.exercise_name} x{set_log.actual_reps}{weight_text}")

    session = await _load_session(store, session_id)
    next_index = session.next_unlogged_index()
    if next_index is None:
        echo_info(f"All sets logged. Cool down with: calisthenics stretches {session_id}")
    else:
        upcoming = session.sets[next_index]
        echo_info(f"Next: set {next_index + 1}, {upcoming.exercise_name} ({upcoming.target_rep_range})")


@click.command()
@click.argument("session_id", type=int)
@click.option("--seed", type=int, help="Seed the random choices (for reproducible output)")
@click.pass_context
@async_command
async def stretches(ctx: click.Context, session_id: int, seed: int | None):
    """Recommend cooldown stretches for a workout."""
    ensure_initialized(ctx)
    store = get_store(ctx)
    session = await _load_session(store, session_id)

    selected = await get_stretches_for_workout(store, session.muscle_chains, make_rng(seed))
    if not selected:
        echo_warning("No active stretches match this workout's muscle chains.")
        return

    rows = [
        [str(s.id), s.position.value, s.name, ", ".join(s.muscle_groups)]
        for s in selected
    ]
    click.echo()
    click.echo(format_table(["ID", "Position", "Stretch", "Targets"], rows))
    click.echo()
    ids = " ".join(f"-s {s.id}" for s in selected)
    click.echo(f"When done: calisthenics complete {session_id} --effort 2 {ids}")


@click.command()
@click.argument("session_id", type=int)
@click.option(
    "--effort",
    "-e",
    type=click.IntRange(1, 3),
    required=True,
    help="1 = Too Easy, 2 = Tough, 3 = Too Hard",
)
@click.option("--stretch", "-s", "stretch_ids", type=int, multiple=True, help="Completed stretch ID")
@click.pass_context
@async_command
async def complete(ctx: click.Context, session_id: int, effort: int, stretch_ids: tuple[int, ...]):
    """Finish a workout and advance the rotation."""
    ensure_initialized(ctx)
    store = get_store(ctx)

    session = await _load_session(store, session_id)
    if session.completed:
        echo_warning(f"Workout {session_id} was already completed; recording again.")

    await complete_workout(store, session_id, effort, list(stretch_ids))
    settings = await store.get_settings()

    echo_success(f"Workout {session_id} completed ({EffortRating(effort).label})")
    click.echo(f"Next workout: {settings.current_workout_type.label}")
