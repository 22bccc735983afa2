"""Tasks API endpoints."""

from typing import Any, Optional

from taskflow_api.api.client import APIClient


class TasksAPI:
    """Tasks API client.

    Every method returns the decoded response envelope.
    """

    def __init__(self, client: APIClient):
        self.client = client

    async def health(self) -> dict:
        """Check that the server is up."""
        response = await self.client.get("/health")
        return response.json()

    async def list_tasks(self) -> dict:
        """List all tasks."""
        response = await self.client.get("/api/tasks")
        return response.json()

    async def get_task(self, task_id: str) -> dict:
        """Get a specific task by ID."""
        response = await self.client.get(f"/api/tasks/{task_id}")
        return response.json()

    async def create_task(
        self,
        title: str,
        *,
        priority: str,
        description: str = "",
        due_date: Optional[str] = None,
    ) -> dict:
        """Create a new task."""
        data: dict[str, Any] = {
            "title": title,
            "description": description,
            "priority": priority,
        }
        if due_date:
            data["dueDate"] = due_date

        response = await self.client.post("/api/tasks", json=data)
        return response.json()

    async def update_task(self, task_id: str, **updates: Any) -> dict:
        """Update a task with any subset of its fields (wire names)."""
        response = await self.client.put(f"/api/tasks/{task_id}", json=updates)
        return response.json()

    async def delete_task(self, task_id: str) -> dict:
        """Delete a task."""
        response = await self.client.delete(f"/api/tasks/{task_id}")
        return response.json()
