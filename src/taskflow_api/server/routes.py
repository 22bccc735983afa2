"""HTTP routes for the task resource."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from taskflow_api.models import ApiResponse
from taskflow_api.services import TaskService

SERVICE_KEY = "taskflow_service"

bp = Blueprint("tasks", __name__)


def get_service() -> TaskService:
    """Return the TaskService bound to the current application."""
    return current_app.extensions[SERVICE_KEY]


def respond(envelope: ApiResponse, status: int = 200):
    return jsonify(envelope.to_json()), status


def request_payload() -> Any:
    """Decode the JSON body; an empty or non-JSON body counts as an empty object.

    A JSON body that does not parse decodes to None and is rejected by the
    service as not being an object.
    """
    if not request.is_json or not request.get_data(cache=True):
        return {}
    return request.get_json(silent=True)


@bp.get("/health")
def health():
    return respond(ApiResponse(success=True, message=get_service().health()))


@bp.get("/api/tasks")
def list_tasks():
    tasks = get_service().list_tasks()
    return respond(ApiResponse(success=True, data=[task.to_json() for task in tasks]))


@bp.get("/api/tasks/<task_id>")
def get_task(task_id: str):
    task = get_service().get_task(task_id)
    return respond(ApiResponse(success=True, data=task.to_json()))


@bp.post("/api/tasks")
def create_task():
    task = get_service().create_task(request_payload())
    return respond(
        ApiResponse(
            success=True, data=task.to_json(), message="Task created successfully"
        ),
        201,
    )


@bp.put("/api/tasks/<task_id>")
def update_task(task_id: str):
    task = get_service().update_task(task_id, request_payload())
    return respond(
        ApiResponse(
            success=True, data=task.to_json(), message="Task updated successfully"
        )
    )


@bp.delete("/api/tasks/<task_id>")
def delete_task(task_id: str):
    get_service().delete_task(task_id)
    return respond(ApiResponse(success=True, message="Task deleted successfully"))
