"""Repository interfaces for TaskFlow.

Implementations (Adapters) are in:
- taskflow_api.adapters.memory (process-local storage)
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
