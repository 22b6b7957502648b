"""Settings commands."""

import click

from ..engine import get_muscle_chains
from ..models.session import WorkoutType
from ..services.settings import set_next_workout_type, set_rest_timer
from .base import async_command, echo_success, ensure_initialized, get_store


@click.group()
@click.pass_context
def settings(ctx):
    """View and change app settings."""
    ensure_initialized(ctx)


@settings.command(name="show")
@click.pass_context
@async_command
async def show_settings(ctx):
    """Show the current settings."""
    current = await get_store(ctx).get_settings()
    click.echo(f"Next workout: {current.current_workout_type.label} ({current.current_workout_type.value})")
    click.echo(f"Rest timer:   {current.rest_timer_seconds}s")


@settings.command(name="next")
@click.argument("workout_type", type=click.Choice([wt.value for wt in WorkoutType]))
@click.pass_context
@async_command
async def next_workout(ctx, workout_type: str):
    """Manually set which workout comes next."""
    updated = await set_next_workout_type(get_store(ctx), workout_type)
    chains = " / ".join(mc.value for mc in get_muscle_chains(updated.current_workout_type))
    echo_success(f"Next workout: {updated.current_workout_type.label} ({chains})")


@settings.command(name="rest-timer")
@click.argument("seconds", type=int)
@click.pass_context
@async_command
async def rest_timer(ctx, seconds: int):
    """Set the rest timer duration in seconds."""
    updated = await set_rest_timer(get_store(ctx), seconds)
    echo_success(f"Rest timer set to {updated.rest_timer_seconds}s")
