"""Repository abstraction layer for TaskFlow.

This module defines the abstract base class (interface) for task storage,
following the Ports & Adapters pattern. The service layer depends only on
this contract; the in-memory adapter lives in taskflow_api.adapters.memory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from taskflow_api.models import Task, TaskCreate, TaskUpdate


class TaskRepository(ABC):
    """Abstract base class for task storage operations.

    Implementations hand out copies of stored tasks, never references into
    their own state.
    """

    @abstractmethod
    def list_all(self) -> list[Task]:
        """List all tasks in insertion order.

        Returns:
            List of Task objects
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def get(self, task_id: str) -> Task:
        """Get a specific task by ID.

        Args:
            task_id: Unique identifier for the task

        Returns:
            Task object

        Raises:
            TaskNotFoundError: If task does not exist
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    def add(self, task_data: TaskCreate) -> Task:
        """Create a new task.

        Args:
            task_data: Validated TaskCreate object

        Returns:
            Created Task object with generated ID and timestamps
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    def update(self, task_id: str, updates: TaskUpdate) -> Task:
        """Merge the supplied fields into an existing task.

        Args:
            task_id: Unique identifier for the task
            updates: Validated TaskUpdate object

        Returns:
            Updated Task object

        Raises:
            TaskNotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def delete(self, task_id: str) -> bool:
        """Delete a task.

        Args:
            task_id: Unique identifier for the task

        Returns:
            True if deletion was successful

        Raises:
            TaskNotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )
