"""Task data models.

Request models carry the field rules; a request that fails them is rejected
as a whole before the store is touched.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_serializer,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

TITLE_MESSAGE = f"Title must be 1-{TITLE_MAX_LENGTH} characters"
DESCRIPTION_MESSAGE = (
    f"Description must be less than {DESCRIPTION_MAX_LENGTH} characters"
)
COMPLETED_MESSAGE = "Completed must be a boolean"
PRIORITY_MESSAGE = "Priority must be low, medium, or high"
DUE_DATE_MESSAGE = "Due date must be a valid ISO date"


class Priority(str, Enum):
    """Task priority level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as UTC with millisecond precision and a Z suffix."""
    return (
        value.astimezone(UTC)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _check_title(value: Any) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("title", TITLE_MESSAGE)
    value = value.strip()
    if not 1 <= len(value) <= TITLE_MAX_LENGTH:
        raise PydanticCustomError("title", TITLE_MESSAGE)
    return value


def _check_description(value: Any) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("description", DESCRIPTION_MESSAGE)
    value = value.strip()
    if len(value) > DESCRIPTION_MAX_LENGTH:
        raise PydanticCustomError("description", DESCRIPTION_MESSAGE)
    return value


def _check_completed(value: Any) -> bool:
    # JSON booleans only; "true" or 1 are rejected.
    if not isinstance(value, bool):
        raise PydanticCustomError("completed", COMPLETED_MESSAGE)
    return value


def _check_priority(value: Any) -> Priority:
    try:
        return Priority(value)
    except (ValueError, TypeError):
        raise PydanticCustomError("priority", PRIORITY_MESSAGE) from None


def _check_due_date(value: Any) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("due_date", DUE_DATE_MESSAGE)
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise PydanticCustomError("due_date", DUE_DATE_MESSAGE) from None
    return value


Title = Annotated[str, BeforeValidator(_check_title)]
Description = Annotated[str, BeforeValidator(_check_description)]
Completed = Annotated[bool, BeforeValidator(_check_completed)]
TaskPriority = Annotated[Priority, BeforeValidator(_check_priority)]
DueDate = Annotated[str, BeforeValidator(_check_due_date)]


class Task(BaseModel):
    """Task model representing a stored task.

    Attributes:
        id: Unique identifier (UUID4 string)
        title: Trimmed title, 1-100 characters
        description: Trimmed description, up to 500 characters
        completed: Completion status
        priority: Priority level
        due_date: Optional ISO-8601 due date, kept as supplied
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str = ""
    completed: bool = False
    priority: Priority
    due_date: str | None = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    def apply_update(self, updates: TaskUpdate, updated_at: datetime) -> Task:
        """Return a copy with the supplied update fields merged in.

        Only fields present in the request override stored values; id and
        created_at never change. updated_at never moves backwards.
        """
        changes: dict[str, Any] = {}
        for name in TaskUpdate.model_fields:
            if name in updates.model_fields_set:
                changes[name] = getattr(updates, name)
        changes["updated_at"] = max(updated_at, self.updated_at)
        return self.model_copy(update=changes)

    def to_json(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape, omitting an unset due date."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TaskCreate(BaseModel):
    """Model for creating a new task.

    Attributes:
        title: Task title (required)
        description: Detailed description (defaults to empty)
        priority: Priority level (required)
        due_date: Optional ISO-8601 due date
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")

    title: Title = Field(default=None, validate_default=True)
    description: Description = ""
    priority: TaskPriority = Field(default=None, validate_default=True)
    due_date: DueDate = None


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    All fields are optional; only fields present in the request are applied.
    An explicit null is validated like any other value and rejected.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")

    title: Title = None
    description: Description = None
    completed: Completed = None
    priority: TaskPriority = None
    due_date: DueDate = None


class ApiResponse(BaseModel):
    """Uniform response envelope."""

    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None

    def to_json(self) -> dict[str, Any]:
        """Serialize, dropping envelope keys that are not set."""
        envelope: dict[str, Any] = {"success": self.success}
        for key in ("data", "message", "error"):
            value = getattr(self, key)
            if value is not None:
                envelope[key] = value
        return envelope
