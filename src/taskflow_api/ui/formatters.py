"""Output formatters for different formats."""

import json
import re
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()

TASK_COLUMNS = ["id", "title", "priority", "completed", "dueDate", "updatedAt"]


def column_title(key: str) -> str:
    """Turn a camelCase or snake_case key into a column heading."""
    words = re.sub(r"(?<!^)(?=[A-Z])", " ", key).replace("_", " ")
    return words.title()


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        format_table(data, wide=output_format == "wide")


def format_table(data: Any, wide: bool = False) -> None:
    """Format data as a table."""
    if isinstance(data, list):
        if not data:
            console.print("[yellow]No tasks found[/yellow]")
            return
        format_dict_table(data, wide)
    elif isinstance(data, dict):
        format_single_item(data)
    elif data is None:
        console.print("[yellow]No data to display[/yellow]")
    else:
        console.print(data)


def format_dict_table(items: list[dict], wide: bool = False) -> None:
    """Format a list of dictionaries as a table.

    Narrow output keeps the task columns that matter at a glance; wide output
    shows every key of the first item.
    """
    columns = list(items[0].keys())
    if not wide:
        columns = [c for c in TASK_COLUMNS if c in columns] or columns

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(column_title(col))

    for item in items:
        table.add_row(*[_cell(item.get(col)) for col in columns])

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(column_title(key), _cell(value))

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
