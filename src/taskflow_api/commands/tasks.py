"""Task management commands."""

from typing import Optional

import typer

from taskflow_api.api.client import get_client
from taskflow_api.api.tasks import TasksAPI
from taskflow_api.commands.decorators import command_wrapper
from taskflow_api.config import get_config_manager
from taskflow_api.models import Priority
from taskflow_api.ui.formatters import format_info, format_output, format_success
from taskflow_api.utils.typer_helpers import SuggestingGroup

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")


def _output_format(output: Optional[str], profile: str) -> str:
    if output:
        return output
    return get_config_manager(profile).get("output.format") or "table"


@app.command("list")
@command_wrapper
async def list_tasks(
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format (table, wide, json, yaml)"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """List tasks."""
    client = get_client(profile)
    try:
        result = await TasksAPI(client).list_tasks()
        format_output(result.get("data", []), _output_format(output, profile))
    finally:
        await client.close()


@app.command("get")
@command_wrapper
async def get_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get task details."""
    client = get_client(profile)
    try:
        result = await TasksAPI(client).get_task(task_id)
        format_output(result.get("data"), _output_format(output, profile))
    finally:
        await client.close()


@app.command("create")
@command_wrapper
async def create_task(
    title: str = typer.Argument(..., help="Task title"),
    description: str = typer.Option("", "--description", "-d", help="Description"),
    priority: Priority = typer.Option(
        Priority.MEDIUM, "--priority", "-p", help="Priority"
    ),
    due: Optional[str] = typer.Option(None, "--due", help="Due date (ISO 8601)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Create a new task."""
    client = get_client(profile)
    try:
        result = await TasksAPI(client).create_task(
            title,
            description=description,
            priority=priority.value,
            due_date=due,
        )
        format_success(result.get("message", "Task created"))
        format_output(result.get("data"), _output_format(output, profile))
    finally:
        await client.close()


@app.command("update")
@command_wrapper
async def update_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    title: Optional[str] = typer.Option(None, "--title", help="New title"),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="New description"
    ),
    priority: Optional[Priority] = typer.Option(
        None, "--priority", "-p", help="New priority"
    ),
    due: Optional[str] = typer.Option(None, "--due", help="New due date (ISO 8601)"),
    completed: Optional[bool] = typer.Option(
        None, "--completed/--not-completed", help="Mark complete or incomplete"
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Update fields of an existing task; omitted fields stay unchanged."""
    updates: dict = {}
    if title is not None:
        updates["title"] = title
    if description is not None:
        updates["description"] = description
    if priority is not None:
        updates["priority"] = priority.value
    if due is not None:
        updates["dueDate"] = due
    if completed is not None:
        updates["completed"] = completed

    if not updates:
        format_info("No fields given; only the update timestamp will change")

    client = get_client(profile)
    try:
        result = await TasksAPI(client).update_task(task_id, **updates)
        format_success(result.get("message", "Task updated"))
        format_output(result.get("data"), _output_format(output, profile))
    finally:
        await client.close()


@app.command("delete")
@command_wrapper
async def delete_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Delete a task."""
    if not yes and not typer.confirm(f"Delete task {task_id}?"):
        format_info("Cancelled")
        raise typer.Exit(0)

    client = get_client(profile)
    try:
        result = await TasksAPI(client).delete_task(task_id)
        format_success(result.get("message", "Task deleted"))
    finally:
        await client.close()
