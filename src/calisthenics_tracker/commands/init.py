"""Initialize and reset commands."""

import click

from ..db import init_db, reset_database, seed_database
from .base import async_command, echo_info, echo_success, echo_warning, get_ctx_db_path


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the database with the default catalog.

    Creates the schema, loads the bundled exercises and stretches, and
    seeds settings and progression records. Safe to run again.
    """
    db_path = get_ctx_db_path(ctx)

    echo_info(f"Initializing database at {db_path}")

    await init_db(db_path)
    echo_success("Database initialized")

    if await seed_database(db_path):
        echo_success("Exercise and stretch catalog populated")
    else:
        echo_info("Catalog already present, nothing to seed")

    click.echo()
    click.echo("Next steps:")
    click.echo("  calisthenics status      # See the next scheduled workout")
    click.echo("  calisthenics start       # Generate it")


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
@async_command
async def reset(ctx: click.Context, yes: bool):
    """Delete all data, including workout history, and re-seed defaults."""
    if not yes and not click.confirm(
        "This deletes all workouts, progress and catalog edits. Continue?"
    ):
        echo_info("Reset cancelled")
        return

    await reset_database(get_ctx_db_path(ctx))
    echo_warning("All data deleted")
    echo_success("Default catalog restored")
