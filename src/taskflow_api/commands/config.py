"""Configuration management commands."""

from typing import Optional

import typer
from rich.console import Console

from taskflow_api.config import get_config_manager
from taskflow_api.ui.formatters import format_error, format_output, format_success
from taskflow_api.utils.typer_helpers import SuggestingGroup

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = Console()


@app.command("view")
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str = typer.Option("yaml", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager(profile)
    format_output(config_manager.config.model_dump(), output)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., server.port)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager(profile).get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)
    console.print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., api.endpoint)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager(profile)
    if config_manager.get(key) is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)

    parsed_value: str | int | bool = value
    if value.lower() in ("true", "false"):
        parsed_value = value.lower() == "true"
    elif value.isdigit():
        parsed_value = int(value)

    try:
        config_manager.set(key, parsed_value)
    except ValueError as e:
        format_error(f"Invalid value for '{key}': {e}")
        raise typer.Exit(2) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    get_config_manager(profile).reset(key)

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")


@app.command("list")
def list_profiles(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """List all configuration profiles."""
    profiles = get_config_manager(profile).list_profiles()

    if not profiles:
        console.print("[yellow]No profiles found[/yellow]")
        return

    for prof in profiles:
        marker = " *" if prof == profile else ""
        console.print(f"{prof}{marker}")
