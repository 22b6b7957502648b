"""Web server command."""

import os

import click

from .base import ensure_initialized, get_ctx_db_path


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the JSON API server.

    Examples:

        # Start on default port (8000)
        calisthenics serve

        # Development mode with auto-reload
        calisthenics serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    db_path = get_ctx_db_path(ctx)

    click.echo()
    click.echo(click.style("Starting calisthenics API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:    http://{host}:{port}")
    click.echo(f"  API docs: http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    if reload:
        # The reloader imports the factory fresh, so pass the location via env
        os.environ["CALISTHENICS_DATA_DIR"] = str(db_path.parent)
        uvicorn.run(
            "calisthenics_tracker.web:create_app",
            host=host,
            port=port,
            reload=True,
            factory=True,
        )
    else:
        uvicorn.run(create_app(db_path), host=host, port=port)
