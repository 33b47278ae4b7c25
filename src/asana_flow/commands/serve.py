"""Web server command."""

import click


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str, port: int, reload: bool):
    """Start the JSON API server.

    Examples:

        # Start on default port (8000)
        asana-flow serve

        # Expose to network on a custom port
        asana-flow serve --host 0.0.0.0 --port 3000
    """
    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting asana-flow API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "asana_flow.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
