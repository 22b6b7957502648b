"""CLI entry point for calisthenics-tracker."""

from pathlib import Path

import click

from .commands import (
    complete,
    exercises,
    export,
    history,
    init,
    log_set_cmd,
    reset,
    serve,
    settings,
    show,
    start,
    status,
    stretch_catalog,
    stretches,
)
from .config import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="calisthenics")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="CALISTHENICS_DATA_DIR",
    help="Directory holding the database (default: ./data)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level",
)
@click.pass_context
def main(ctx: click.Context, data_dir: Path | None, log_level: str | None):
    """calisthenics: a four-day rotating calisthenics workout tracker.

    Rotates Upper #1, Lower #1, Upper #2 and Lower #2 workouts, picks a
    drop set per muscle chain, logs your sets and suggests a cooldown.

    Example usage:

        # Set up the database
        calisthenics init

        # Generate the next workout
        calisthenics start

        # Log set 1 of workout 1
        calisthenics log 1 1 --reps 6

        # Cool down and finish
        calisthenics stretches 1
        calisthenics complete 1 --effort 2 -s 4 -s 9
    """
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register commands
main.add_command(init)
main.add_command(reset)
main.add_command(status)
main.add_command(start)
main.add_command(show)
main.add_command(log_set_cmd)
main.add_command(stretches)
main.add_command(complete)
main.add_command(history)
main.add_command(export)
main.add_command(exercises)
main.add_command(stretch_catalog)
main.add_command(settings)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
