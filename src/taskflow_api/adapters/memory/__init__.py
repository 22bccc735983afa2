"""In-memory storage adapter."""

from .task_repository import SEED_TASK, InMemoryTaskRepository

__all__ = ["InMemoryTaskRepository", "SEED_TASK"]
