"""Wire-level checks: JSON field names, status codes and error bodies."""

import pytest
from fastapi.testclient import TestClient

from taskboard import __version__
from taskboard.config import Settings
from taskboard.main import app


def _create_project(client: TestClient, name: str = "Website") -> dict:
    response = client.post("/api/projects", json={"name": name, "description": "Demo"})
    assert response.status_code == 201
    return response.json()


def test_health(client: TestClient):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_task_payload_uses_camel_case(client: TestClient):
    project = _create_project(client)

    response = client.post(
        f"/api/projects/{project['id']}/tasks",
        json={"title": "Mockups", "priority": "high", "dueDate": "2024-05-01T12:00:00Z"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["projectId"] == project["id"]
    assert body["status"] == "todo"
    assert body["dueDate"].startswith("2024-05-01")
    assert "createdAt" in body


def test_invalid_status_is_rejected_with_400(client: TestClient):
    project = _create_project(client)
    created = client.post(f"/api/projects/{project['id']}/tasks", json={"title": "Build"}).json()

    response = client.put(f"/api/tasks/{created['id']}", json={"status": "blocked"})

    assert response.status_code == 400
    assert "status" in response.json()["detail"]


def test_missing_project_returns_404(client: TestClient):
    response = client.get("/api/projects/123")
    assert response.status_code == 404
    assert response.json() == {"detail": "Project not found"}


def test_delete_returns_204(client: TestClient):
    project = _create_project(client)
    assert client.delete(f"/api/projects/{project['id']}").status_code == 204


def test_board_and_drop_round_trip(client: TestClient):
    project = _create_project(client)
    todo = client.post(f"/api/projects/{project['id']}/tasks", json={"title": "Todo"}).json()
    done = client.post(
        f"/api/projects/{project['id']}/tasks", json={"title": "Done", "status": "done"}
    ).json()

    board = client.get("/api/board").json()
    assert set(board) == {"todo", "in_progress", "done", "unplaced"}
    assert [t["id"] for t in board["todo"]] == [todo["id"]]

    response = client.post("/api/board/drop", json={"activeId": todo["id"], "overId": done["id"]})
    assert response.status_code == 200
    assert response.json()["request"] == {"id": todo["id"], "status": "done"}

    board = client.get("/api/board", params={"projectId": project["id"]}).json()
    assert board["todo"] == []
    assert [t["id"] for t in board["done"]] == [todo["id"], done["id"]]

    response = client.post("/api/board/drop", json={"activeId": todo["id"], "overId": None})
    assert response.json() == {"request": None, "task": None}


def test_reports_payload(client: TestClient):
    project = _create_project(client, "Only")
    client.post(f"/api/projects/{project['id']}/tasks", json={"title": "A", "status": "done"})

    report = client.get("/api/reports").json()
    assert report["statusCounts"] == [{"name": "Done", "value": 1}]
    assert report["projectProgress"] == [{"name": "Only", "progress": 100}]

    summary = client.get("/api/reports/summary").json()
    assert summary == {"activeProjects": 1, "totalTasks": 1, "completedTasks": 1}


def test_members_endpoints(client: TestClient):
    response = client.post(
        "/api/members", json={"name": "Ana", "email": "ana@example.com", "avatarUrl": "https://x/a.png"}
    )
    assert response.status_code == 201
    assert response.json()["avatarUrl"] == "https://x/a.png"

    duplicate = client.post("/api/members", json={"name": "Ana", "email": "ana@example.com"})
    assert duplicate.status_code == 400

    invalid = client.post("/api/members", json={"name": "Bad", "email": "not-an-email"})
    assert invalid.status_code == 400

    assert [m["name"] for m in client.get("/api/members").json()] == ["Ana"]


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/tasks/9223372036854775808"),
        ("put", "/api/tasks/9223372036854775808"),
        ("get", "/api/projects/9223372036854775808"),
        ("put", "/api/projects/-9223372036854775809"),
        ("put", "/api/members/9223372036854775808"),
        ("delete", "/api/members/9223372036854775808"),
    ],
)
def test_ids_beyond_integer_column_are_not_found(client: TestClient, method, path):
    # Same app and database override as `client`, but errors come back as responses
    safe_client = TestClient(app, raise_server_exceptions=False)
    kwargs = {"json": {}} if method == "put" else {}

    response = getattr(safe_client, method)(path, **kwargs)

    assert response.status_code == 404
    assert "Traceback" not in response.text


def test_out_of_range_ids_on_list_and_delete(client: TestClient):
    assert client.get("/api/projects/9223372036854775808/tasks").json() == []
    assert client.get("/api/board", params={"projectId": 9223372036854775808}).json()["todo"] == []
    assert client.delete("/api/tasks/9223372036854775808").status_code == 204
    assert client.delete("/api/projects/9223372036854775808").status_code == 204


def test_debug_is_off_by_default():
    assert Settings.model_fields["DEBUG"].default is False
    assert app.debug is False


def test_health_reports_package_version(client: TestClient):
    assert Settings.model_fields["APP_VERSION"].default == __version__
    assert client.get("/api/health").json()["version"] == __version__
