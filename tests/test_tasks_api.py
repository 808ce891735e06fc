# tests/test_tasks_api.py

from __future__ import annotations

from datetime import datetime


def _create_user(client, name: str = "Ada", email: str = "ada@example.com") -> dict:
    response = client.post("/users", json={"name": name, "email": email})
    assert response.status_code == 201
    return response.json()


def _create_task(client, **body) -> dict:
    body.setdefault("title", "Buy milk")
    response = client.post("/tasks", json=body)
    assert response.status_code == 201
    return response.json()


class TestTaskRoutes:
    def test_create_task_returns_201_with_camel_case_body(self, client) -> None:
        response = client.post("/tasks", json={"title": "Buy milk", "description": "2L", "status": "OPEN"})

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], str) and body["id"]
        assert body["title"] == "Buy milk"
        assert body["description"] == "2L"
        assert body["status"] == "TODO"
        assert body["assigneeId"] is None
        datetime.fromisoformat(body["creationDate"].replace("Z", "+00:00"))

    def test_create_task_with_blank_title_is_400(self, client, task_repo) -> None:
        response = client.post("/tasks", json={"title": "  "})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        body = response.json()
        assert body["status"] == 400
        assert body["title"] == "Bad Request"
        assert body["detail"] == "title is required"
        assert body["instance"] == "/tasks"
        assert "timestamp" in body
        assert task_repo.items == {}

    def test_malformed_body_is_400(self, client) -> None:
        response = client.post(
            "/tasks", content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["title"] == "Bad Request"

    def test_list_and_get(self, client) -> None:
        created = _create_task(client)

        listed = client.get("/tasks")
        fetched = client.get(f"/tasks/{created['id']}")

        assert listed.status_code == 200
        assert listed.json() == [created]
        assert fetched.json() == created

    def test_list_filters_by_status(self, client) -> None:
        _create_task(client, title="a")
        done = _create_task(client, title="b", status="done")

        response = client.get("/tasks", params={"status": "DONE"})

        assert [t["id"] for t in response.json()] == [done["id"]]

    def test_list_with_unknown_status_filter_is_400(self, client) -> None:
        assert client.get("/tasks", params={"status": "OPEN"}).status_code == 400

    def test_get_unknown_task_is_404(self, client) -> None:
        response = client.get("/tasks/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "Task not found"

    def test_update_task(self, client) -> None:
        created = _create_task(client, description="2L")

        response = client.put(f"/tasks/{created['id']}", json={"title": "Buy oat milk", "status": "in_progress"})

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Buy oat milk"
        assert body["description"] == "2L"
        assert body["status"] == "IN_PROGRESS"
        assert body["creationDate"] == created["creationDate"]

    def test_update_unknown_task_is_404(self, client) -> None:
        assert client.put("/tasks/nope", json={"title": "x"}).status_code == 404

    def test_delete_task(self, client) -> None:
        created = _create_task(client)

        response = client.delete(f"/tasks/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/tasks/{created['id']}").status_code == 404

    def test_delete_unknown_task_is_404(self, client) -> None:
        assert client.delete("/tasks/nope").status_code == 404


class TestAssignmentRoutes:
    def test_assign_and_unassign(self, client) -> None:
        user = _create_user(client)
        task = _create_task(client)

        assigned = client.put(f"/tasks/{task['id']}/assignee", json={"assigneeId": user["id"]})
        assert assigned.status_code == 200
        assert assigned.json()["assigneeId"] == user["id"]
        assert client.get(f"/users/{user['id']}").json()["taskIds"] == [task["id"]]

        unassigned = client.delete(f"/tasks/{task['id']}/assignee")
        assert unassigned.status_code == 200
        assert unassigned.json()["assigneeId"] is None
        assert client.get(f"/users/{user['id']}").json()["taskIds"] == []

    def test_assign_blank_assignee_is_400(self, client) -> None:
        task = _create_task(client)

        response = client.put(f"/tasks/{task['id']}/assignee", json={"assigneeId": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == "assigneeId is required"

    def test_assign_unknown_user_is_404(self, client) -> None:
        task = _create_task(client)

        response = client.put(f"/tasks/{task['id']}/assignee", json={"assigneeId": "u1"})

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_assign_unknown_task_is_404(self, client) -> None:
        user = _create_user(client)

        response = client.put("/tasks/nope/assignee", json={"assigneeId": user["id"]})

        assert response.status_code == 404
        assert response.json()["detail"] == "Task not found"

    def test_unassign_unknown_task_is_404(self, client) -> None:
        assert client.delete("/tasks/nope/assignee").status_code == 404
