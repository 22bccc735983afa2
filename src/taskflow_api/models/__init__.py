"""TaskFlow domain models.

Pydantic models for the task entity, its create/update requests and the
response envelope.
"""

from .core import (
    ApiResponse,
    Priority,
    Task,
    TaskCreate,
    TaskUpdate,
    format_timestamp,
)

__all__ = [
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "Priority",
    "ApiResponse",
    "format_timestamp",
]
