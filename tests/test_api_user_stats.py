from datetime import datetime


def test_user_stats_absent_initially(client):
    response = client.get("/api/user-stats")

    assert response.status_code == 200
    assert response.json() is None


def test_patch_creates_stats_with_defaults(client):
    response = client.patch("/api/user-stats", json={"streakDays": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["streakDays"] == 5
    assert body["totalTasksCompleted"] == 0
    assert body["overallProgress"] == 0
    assert body["lastActivityDate"] is None
    assert body["updatedAt"]
    assert client.get("/api/user-stats").json() == body


def test_patch_refreshes_updated_at(client):
    first = client.patch("/api/user-stats", json={}).json()
    second = client.patch("/api/user-stats", json={"overallProgress": 10}).json()

    assert second["id"] == first["id"]
    assert datetime.fromisoformat(second["updatedAt"]) >= datetime.fromisoformat(
        first["updatedAt"]
    )


def test_patch_rejects_out_of_range_progress(client):
    response = client.patch("/api/user-stats", json={"overallProgress": 101})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid user stats data"}


def test_task_completion_updates_stats(client, level, make_tasks):
    tasks = make_tasks(level.id, 2)

    client.patch(f"/api/tasks/{tasks[0].id}", json={"isCompleted": True})

    body = client.get("/api/user-stats").json()
    assert body["totalTasksCompleted"] == 1
    assert body["overallProgress"] == 50
    assert body["streakDays"] == 1
    assert body["lastActivityDate"] is not None
