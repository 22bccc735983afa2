"""Task service - Business logic for task operations.

This service layer sits between the HTTP routes and the repository. It turns
raw request payloads into validated request models and reports every rule a
payload violates at once.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from taskflow_api.errors import TaskValidationError
from taskflow_api.models import Task, TaskCreate, TaskUpdate
from taskflow_api.repositories import TaskRepository

BODY_NOT_OBJECT_MESSAGE = "Request body must be a JSON object"

HEALTH_MESSAGE = "TaskFlow API is running"

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a raw payload against a request model.

    Raises:
        TaskValidationError: With one message per violated rule, in field order
    """
    if not isinstance(payload, dict):
        raise TaskValidationError([BODY_NOT_OBJECT_MESSAGE])
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise TaskValidationError([error["msg"] for error in e.errors()]) from e


class TaskService:
    """Service for task business logic.

    Validation always completes before the repository is touched, so a
    rejected request never leaves a partial change behind.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    def health(self) -> str:
        """Return the liveness message."""
        return HEALTH_MESSAGE

    def list_tasks(self) -> list[Task]:
        """List every task in insertion order."""
        return self.repository.list_all()

    def get_task(self, task_id: str) -> Task:
        """Get a specific task by ID."""
        return self.repository.get(task_id)

    def create_task(self, payload: Any) -> Task:
        """Validate a create payload and store the new task.

        Args:
            payload: Decoded JSON body with title, description, priority and
                an optional dueDate

        Returns:
            Created Task object
        """
        task_data = parse_payload(TaskCreate, payload)
        return self.repository.add(task_data)

    def update_task(self, task_id: str, payload: Any) -> Task:
        """Validate an update payload and merge it into an existing task.

        Args:
            task_id: Task ID to update
            payload: Decoded JSON body with any subset of the task fields

        Returns:
            Updated Task object
        """
        updates = parse_payload(TaskUpdate, payload)
        return self.repository.update(task_id, updates)

    def delete_task(self, task_id: str) -> bool:
        """Delete a task."""
        return self.repository.delete(task_id)
