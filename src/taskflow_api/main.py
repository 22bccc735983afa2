"""Main entry point for the TaskFlow CLI."""

from typing import Optional

import typer
from rich.console import Console

from taskflow_api import __version__
from taskflow_api.api.client import get_client
from taskflow_api.api.tasks import TasksAPI
from taskflow_api.commands import config, tasks
from taskflow_api.commands.decorators import command_wrapper
from taskflow_api.config import get_config_manager
from taskflow_api.server import create_app
from taskflow_api.ui.formatters import format_success
from taskflow_api.utils.logger import enable_console_logging
from taskflow_api.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="taskflow",
    cls=SuggestingGroup,
    help="TaskFlow: in-memory task API server and client",
    no_args_is_help=True,
)

console = Console()

app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]TaskFlow API[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
@command_wrapper
async def health(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Check that a TaskFlow server is reachable."""
    endpoint = get_config_manager(profile).get("api.endpoint")
    console.print(f"[cyan]Checking API health at:[/cyan] {endpoint}")

    client = get_client(profile)
    try:
        result = await TasksAPI(client).health()
        format_success(result.get("message", "API is healthy"))
    finally:
        await client.close()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to listen on"),
    debug: Optional[bool] = typer.Option(
        None, "--debug/--no-debug", help="Run Flask in debug mode"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Run the TaskFlow HTTP server with a freshly seeded task list."""
    config_manager = get_config_manager(profile)
    server_config = config_manager.config.server
    host = host or server_config.host
    port = port or config_manager.server_port()
    debug = server_config.debug if debug is None else debug

    logger = enable_console_logging()
    flask_app = create_app(server_config=server_config)

    logger.info("TaskFlow API server running on port %d", port)
    flask_app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
