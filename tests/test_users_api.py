import pytest


@pytest.fixture
def user(client):
    response = client.post("/api/users", json={
        "username": "grace",
        "email": "grace@example.com",
        "password": "hopper",
    })
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def module_ids(client):
    path = client.post("/api/ai-tutor/generate-path", json={
        "language": "python",
        "goals": [],
        "experience": "beginner",
        "timeCommitment": "4h",
    }).json()
    modules = client.get(f"/api/learning-paths/{path['id']}/modules").json()
    return path["id"], [m["id"] for m in modules]


def test_register_hides_password(client, user):
    assert user["username"] == "grace"
    assert "password" not in user
    assert client.get(f"/api/users/{user['id']}").json()["email"] == "grace@example.com"


def test_duplicate_registration_is_400(client, user):
    response = client.post("/api/users", json={
        "username": "grace",
        "email": "other@example.com",
        "password": "x",
    })

    assert response.status_code == 400
    assert response.json() == {"error": "Username or email already registered"}


def test_unknown_user_is_404(client):
    assert client.get("/api/users/nobody").status_code == 404


def test_new_user_has_default_stats(client, user):
    stats = client.get(f"/api/users/{user['id']}/stats").json()

    assert stats["weeklyGoal"] == 15
    assert stats["hoursCompleted"] == 0
    assert stats["goalProgress"] == 0


def test_missing_stats_is_404(client):
    response = client.get("/api/users/ghost/stats")

    assert response.status_code == 404
    assert response.json() == {"error": "User stats not found"}


def test_patch_stats_recomputes_goal_progress(client, user):
    response = client.patch(f"/api/users/{user['id']}/stats", json={"hoursCompleted": 12, "streak": 28})

    assert response.status_code == 200
    stats = response.json()
    assert stats["streak"] == 28
    assert stats["goalProgress"] == 80


def test_patch_stats_rejects_null_counter(client, user):
    response = client.patch(f"/api/users/{user['id']}/stats", json={"weeklyGoal": None})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request data"}

    stats = client.get(f"/api/users/{user['id']}/stats")
    assert stats.status_code == 200
    assert stats.json()["weeklyGoal"] == 15
    assert stats.json()["goalProgress"] == 0


def test_progress_update_is_idempotent(client, module_ids):
    path_id, modules = module_ids

    for _ in range(2):
        response = client.post("/api/users/u1/progress", json={"moduleId": modules[0], "progress": 100})
        assert response.status_code == 200

    rows = client.get(f"/api/users/u1/progress/{path_id}").json()
    assert len(rows) == 1
    assert rows[0]["completed"] is True
    assert rows[0]["learningPathId"] == path_id


def test_progress_out_of_range_is_400(client, module_ids):
    _, modules = module_ids

    response = client.post("/api/users/u1/progress", json={"moduleId": modules[0], "progress": 101})

    assert response.status_code == 400


def test_progress_for_unknown_module_is_404(client):
    response = client.post("/api/users/u1/progress", json={"moduleId": "missing", "progress": 10})

    assert response.status_code == 404


def test_list_all_progress(client, module_ids):
    _, modules = module_ids
    client.post("/api/users/u1/progress", json={"moduleId": modules[0], "progress": 40})
    client.post("/api/users/u1/progress", json={"moduleId": modules[1], "progress": 10})

    rows = client.get("/api/users/u1/progress").json()

    assert sorted(r["progress"] for r in rows) == [10, 40]
    assert all(r["completed"] is False for r in rows)


def test_path_overview(client, module_ids):
    path_id, modules = module_ids
    client.post("/api/users/u1/progress", json={"moduleId": modules[0], "progress": 100})

    overview = client.get(f"/api/users/u1/learning-paths/{path_id}/overview").json()

    assert overview["completedModules"] == 1
    assert overview["totalModules"] == 4
    assert [m["status"] for m in overview["modules"]] == ["completed", "available", "locked", "locked"]
    assert client.get("/api/users/u1/learning-paths/missing/overview").status_code == 404
