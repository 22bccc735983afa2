"""In-memory implementation of TaskRepository."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime

from taskflow_api.adapters.memory.utils import generate_uuid, now_utc
from taskflow_api.errors import TaskNotFoundError
from taskflow_api.models import Priority, Task, TaskCreate, TaskUpdate
from taskflow_api.repositories import TaskRepository
from taskflow_api.utils.logger import get_logger

SEED_TASK = TaskCreate(
    title="Welcome to TaskFlow",
    description="This is your first task. Try marking it as complete!",
    priority=Priority.MEDIUM,
)


class InMemoryTaskRepository(TaskRepository):
    """Task repository holding an ordered list of tasks in process memory.

    Every read-modify-write runs under one lock so a threaded server can share
    a single instance.
    """

    def __init__(
        self,
        *,
        seed: bool = True,
        clock: Callable[[], datetime] = now_utc,
        id_factory: Callable[[], str] = generate_uuid,
    ):
        """Initialize the repository.

        Args:
            seed: Whether to insert the welcome task
            clock: Source of the current UTC time
            id_factory: Generator for new task ids
        """
        self._tasks: list[Task] = []
        self._lock = threading.Lock()
        self._clock = clock
        self._id_factory = id_factory
        self.logger = get_logger()
        if seed:
            self.add(SEED_TASK)

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)

    def __len__(self) -> int:
        return len(self._tasks)

    def list_all(self) -> list[Task]:
        """List all tasks in insertion order."""
        with self._lock:
            return [task.model_copy(deep=True) for task in self._tasks]

    def get(self, task_id: str) -> Task:
        """Get a specific task by ID."""
        with self._lock:
            return self._tasks[self._index_of(task_id)].model_copy(deep=True)

    def add(self, task_data: TaskCreate) -> Task:
        """Create a new task."""
        now = self._clock()
        with self._lock:
            task_id = self._id_factory()
            while any(task.id == task_id for task in self._tasks):
                task_id = self._id_factory()

            task = Task(
                id=task_id,
                title=task_data.title,
                description=task_data.description,
                completed=False,
                priority=task_data.priority,
                due_date=task_data.due_date,
                created_at=now,
                updated_at=now,
            )
            self._tasks.append(task)

        self.logger.debug("task created: %s", task.id)
        return task.model_copy(deep=True)

    def update(self, task_id: str, updates: TaskUpdate) -> Task:
        """Merge supplied fields into an existing task."""
        with self._lock:
            index = self._index_of(task_id)
            updated = self._tasks[index].apply_update(updates, self._clock())
            self._tasks[index] = updated

        self.logger.debug(
            "task updated: %s (%s)", task_id, ", ".join(sorted(updates.model_fields_set))
        )
        return updated.model_copy(deep=True)

    def delete(self, task_id: str) -> bool:
        """Delete a task."""
        with self._lock:
            del self._tasks[self._index_of(task_id)]

        self.logger.debug("task deleted: %s", task_id)
        return True
