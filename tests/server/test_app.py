"""End-to-end tests for the HTTP API using the Flask test client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from taskflow_api.server import create_app

NOT_FOUND = {
    "success": False,
    "error": "Not found",
    "message": "The requested resource was not found",
}


def _create(client, **overrides):
    body = {"title": "Buy milk", "description": "", "priority": "low"}
    body.update(overrides)
    return client.post("/api/tasks", json=body)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {
            "success": True,
            "message": "TaskFlow API is running",
        }


class TestListAndGet:
    def test_list_after_startup_has_seed(self, client):
        response = client.get("/api/tasks")

        assert response.status_code == 200
        body = response.get_json()
        assert body["success"] is True
        assert [task["title"] for task in body["data"]] == ["Welcome to TaskFlow"]
        assert "dueDate" not in body["data"][0]

    def test_get_unknown_task(self, client):
        response = client.get("/api/tasks/nope")
        assert response.status_code == 404
        assert response.get_json() == {"success": False, "error": "Task not found"}


class TestCreate:
    def test_create_then_get(self, client):
        response = _create(client)

        assert response.status_code == 201
        body = response.get_json()
        assert body["success"] is True
        assert body["message"] == "Task created successfully"
        task = body["data"]
        assert task["completed"] is False
        assert task["id"]
        assert task["createdAt"] == task["updatedAt"]

        existing = [t["id"] for t in client.get("/api/tasks").get_json()["data"]]
        assert existing.count(task["id"]) == 1

        fetched = client.get(f"/api/tasks/{task['id']}")
        assert fetched.status_code == 200
        assert fetched.get_json() == {"success": True, "data": task}

    def test_create_keeps_due_date(self, client):
        task = _create(client, dueDate="2024-06-01T09:00:00Z").get_json()["data"]
        assert task["dueDate"] == "2024-06-01T09:00:00Z"

    def test_create_validation_failure(self, client):
        response = _create(client, title="x" * 101, priority="urgent")

        assert response.status_code == 400
        assert response.get_json() == {
            "success": False,
            "error": "Validation failed",
            "message": "Title must be 1-100 characters, "
            "Priority must be low, medium, or high",
        }
        assert len(client.get("/api/tasks").get_json()["data"]) == 1

    def test_create_with_malformed_json(self, client):
        response = client.post(
            "/api/tasks", data="{not json", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.get_json()["message"] == "Request body must be a JSON object"

    def test_create_ignores_non_json_content_type(self, client):
        response = client.post(
            "/api/tasks",
            data='{"title": "x", "priority": "low"}',
            content_type="text/plain",
        )

        assert response.status_code == 400
        assert response.get_json()["message"] == (
            "Title must be 1-100 characters, Priority must be low, medium, or high"
        )
        assert len(client.get("/api/tasks").get_json()["data"]) == 1

    def test_create_with_empty_body_reports_required_fields(self, client):
        response = client.post("/api/tasks")
        assert response.status_code == 400
        assert response.get_json()["message"] == (
            "Title must be 1-100 characters, Priority must be low, medium, or high"
        )


class TestUpdate:
    def test_update_completed_only(self, client):
        task = _create(client, description="2 litres", dueDate="2024-06-01").get_json()["data"]

        response = client.put(f"/api/tasks/{task['id']}", json={"completed": True})

        assert response.status_code == 200
        body = response.get_json()
        assert body["message"] == "Task updated successfully"
        updated = body["data"]
        assert updated["completed"] is True
        for field in ("id", "title", "description", "priority", "dueDate", "createdAt"):
            assert updated[field] == task[field]
        assert updated["updatedAt"] >= task["updatedAt"]

    def test_update_unknown_task(self, client):
        before = client.get("/api/tasks").get_json()

        response = client.put("/api/tasks/bad-id", json={"completed": True})

        assert response.status_code == 404
        assert response.get_json() == {"success": False, "error": "Task not found"}
        assert client.get("/api/tasks").get_json() == before

    def test_update_validation_failure(self, client):
        task = _create(client).get_json()["data"]

        response = client.put(f"/api/tasks/{task['id']}", json={"completed": "yes"})

        assert response.status_code == 400
        assert response.get_json()["message"] == "Completed must be a boolean"

    def test_empty_update_is_accepted(self, client):
        task = _create(client).get_json()["data"]

        response = client.put(f"/api/tasks/{task['id']}", json={})

        assert response.status_code == 200
        assert response.get_json()["data"]["title"] == "Buy milk"

    def test_unknown_fields_are_not_merged(self, client):
        task = _create(client).get_json()["data"]

        updated = client.put(
            f"/api/tasks/{task['id']}",
            json={"title": "Buy oat milk", "id": "forged", "createdAt": "1999-01-01", "owner": "x"},
        ).get_json()["data"]

        assert updated["id"] == task["id"]
        assert updated["createdAt"] == task["createdAt"]
        assert "owner" not in updated
        assert updated["title"] == "Buy oat milk"

    def test_snake_case_field_names_are_ignored(self, client):
        task = _create(client).get_json()["data"]

        response = client.put(
            f"/api/tasks/{task['id']}", json={"due_date": "2025-01-01"}
        )

        assert response.status_code == 200
        assert "dueDate" not in response.get_json()["data"]


class TestDelete:
    def test_delete_twice(self, client):
        task = _create(client).get_json()["data"]

        first = client.delete(f"/api/tasks/{task['id']}")
        assert first.status_code == 200
        assert first.get_json() == {"success": True, "message": "Task deleted successfully"}
        assert len(client.get("/api/tasks").get_json()["data"]) == 1

        second = client.delete(f"/api/tasks/{task['id']}")
        assert second.status_code == 404
        assert second.get_json() == {"success": False, "error": "Task not found"}


class TestFallbacks:
    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE"])
    def test_unknown_path_for_every_method(self, client, method):
        response = client.open("/unknown/path", method=method)
        assert response.status_code == 404
        assert response.get_json() == NOT_FOUND

    def test_unsupported_method_on_known_path(self, client):
        response = client.patch("/api/tasks/some-id", json={"completed": True})
        assert response.status_code == 404
        assert response.get_json() == NOT_FOUND

    def test_unhandled_fault_is_generic_500(self):
        service = MagicMock()
        service.list_tasks.side_effect = RuntimeError("database exploded")
        app = create_app(service=service)

        response = app.test_client().get("/api/tasks")

        assert response.status_code == 500
        assert response.get_json() == {
            "success": False,
            "error": "Internal server error",
            "message": "Something went wrong. Please try again later.",
        }
        assert "exploded" not in response.get_data(as_text=True)

    def test_oversized_body_is_rejected(self, service):
        from taskflow_api.config import ServerConfig

        app = create_app(service=service, server_config=ServerConfig(max_content_length=64))

        response = app.test_client().post(
            "/api/tasks", json={"title": "x" * 100, "priority": "low"}
        )

        assert response.status_code == 413
        body = response.get_json()
        assert body["success"] is False
        assert body["error"]
        assert len(service.list_tasks()) == 1
