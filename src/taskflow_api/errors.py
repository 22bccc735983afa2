"""Application errors surfaced through the HTTP envelope."""

from __future__ import annotations


class TaskFlowError(Exception):
    """Base application error carrying an HTTP status and envelope text."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.error)
        self.message = message

    def to_envelope(self) -> dict:
        """Return the error as a failed response envelope."""
        envelope: dict = {"success": False, "error": self.error}
        if self.message is not None:
            envelope["message"] = self.message
        return envelope


class TaskValidationError(TaskFlowError):
    """One or more request fields violate their rules.

    The message is every violated rule's message joined with ", ".
    """

    status_code = 400
    error = "Validation failed"

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__(", ".join(self.messages))


class TaskNotFoundError(TaskFlowError):
    """No task with the requested id exists."""

    status_code = 404
    error = "Task not found"

    def __init__(self, task_id: str):
        super().__init__()
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task not found: {self.task_id}"
