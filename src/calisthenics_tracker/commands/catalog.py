"""Exercise and stretch catalog management commands."""

import click

from ..models.exercises import MuscleChain
from ..models.stretches import Position
from ..services.catalog import set_exercise_targets
from .base import async_command, echo_info, echo_success, ensure_initialized, format_table, get_store


@click.group()
@click.pass_context
def exercises(ctx):
    """Manage the exercise catalog.

    Inactive exercises are never picked when generating workouts.
    """
    ensure_initialized(ctx)


@exercises.command(name="list")
@click.option(
    "--chain",
    "-c",
    type=click.Choice([mc.value for mc in MuscleChain]),
    help="Only show one muscle chain",
)
@click.pass_context
@async_command
async def list_exercises(ctx, chain: str | None):
    """List exercises by muscle chain, class and difficulty."""
    store = get_store(ctx)
    catalog = await store.exercises.list_all(MuscleChain(chain) if chain else None)

    if not catalog:
        echo_info("No exercises found.")
        return

    rows = [
        [
            str(e.id),
            e.muscle_chain.value,
            e.exercise_class,
            e.difficulty.value,
            e.name,
            "yes" if e.requires_weight else "",
            "" if e.active else "inactive",
        ]
        for e in catalog
    ]
    click.echo()
    click.echo(format_table(
        ["ID", "Chain", "Class", "Difficulty", "Name", "Weighted", ""], rows
    ))


@exercises.command(name="toggle")
@click.argument("exercise_id", type=int)
@click.pass_context
@async_command
async def toggle_exercise(ctx, exercise_id: int):
    """Activate or deactivate an exercise."""
    exercise = await get_store(ctx).exercises.toggle_active(exercise_id)
    state = "active" if exercise.active else "inactive"
    echo_success(f"{exercise.name} is now {state}")


@exercises.command(name="weight")
@click.argument("exercise_id", type=int)
@click.pass_context
@async_command
async def toggle_weight(ctx, exercise_id: int):
    """Toggle whether an exercise needs external weight."""
    exercise = await get_store(ctx).exercises.toggle_requires_weight(exercise_id)
    state = "requires" if exercise.requires_weight else "does not require"
    echo_success(f"{exercise.name} {state} weight")


@exercises.command(name="target")
@click.argument("exercise_id", type=int)
@click.option("--reps", "-r", type=int, help="Target reps (omit to clear)")
@click.option("--weight", "-w", type=float, help="Target added weight (omit to clear)")
@click.pass_context
@async_command
async def set_target(ctx, exercise_id: int, reps: int | None, weight: float | None):
    """Set target reps and weight for an exercise."""
    exercise = await set_exercise_targets(get_store(ctx), exercise_id, reps, weight)
    reps_text = exercise.target_reps if exercise.target_reps is not None else "-"
    weight_text = exercise.target_weight if exercise.target_weight is not None else "-"
    echo_success(f"{exercise.name}: target reps {reps_text}, weight {weight_text}")


@exercises.command(name="progress")
@click.option(
    "--chain",
    "-c",
    type=click.Choice([mc.value for mc in MuscleChain]),
    help="Only show one muscle chain",
)
@click.pass_context
@async_command
async def show_progress(ctx, chain: str | None):
    """Show the difficulty and last use of every exercise class."""
    store = get_store(ctx)
    if chain:
        records = await store.get_progress(MuscleChain(chain))
    else:
        records = await store.progress.list_all()

    if not records:
        echo_info("No progress records yet.")
        return

    rows = []
    for p in records:
        used = [wt.label for wt, cls in p.last_exercise_class_used.items() if cls]
        rows.append([
            p.muscle_chain.value,
            p.exercise_class,
            p.current_difficulty.value,
            p.last_workout_date.strftime("%Y-%m-%d") if p.last_workout_date else "",
            ", ".join(used),
        ])
    click.echo()
    click.echo(format_table(["Chain", "Class", "Difficulty", "Last Trained", "Used In"], rows))


@click.group(name="stretch-catalog")
@click.pass_context
def stretch_catalog(ctx):
    """Manage the stretch catalog."""
    ensure_initialized(ctx)


@stretch_catalog.command(name="list")
@click.option(
    "--position",
    "-p",
    type=click.Choice([p.value for p in Position]),
    help="Only show one position",
)
@click.pass_context
@async_command
async def list_stretches(ctx, position: str | None):
    """List stretches by name."""
    store = get_store(ctx)
    catalog = await store.stretches.list_all(Position(position) if position else None)

    if not catalog:
        echo_info("No stretches found.")
        return

    rows = [
        [
            str(s.id),
            s.position.value,
            s.name,
            ", ".join(s.muscle_groups),
            "" if s.active else "inactive",
        ]
        for s in catalog
    ]
    click.echo()
    click.echo(format_table(["ID", "Position", "Name", "Targets", ""], rows))


@stretch_catalog.command(name="toggle")
@click.argument("stretch_id", type=int)
@click.pass_context
@async_command
async def toggle_stretch(ctx, stretch_id: int):
    """Activate or deactivate a stretch."""
    stretch = await get_store(ctx).stretches.toggle_active(stretch_id)
    state = "active" if stretch.active else "inactive"
    echo_success(f"{stretch.name} is now {state}")
