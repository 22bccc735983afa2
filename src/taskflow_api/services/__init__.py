"""Service layer for TaskFlow."""

from .task_service import TaskService

__all__ = ["TaskService"]
