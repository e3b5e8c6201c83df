TASK = {"name": "Ma première tâche", "description": "Écrire le rapport", "priority": "High"}


def _create(user_client, **overrides):
    payload = {**TASK, **overrides}
    response = user_client.post("/tasks", json=payload)
    assert response.status_code == 201
    return response.json()


# ========== AUTH REQUIRED ==========
def test_tasks_require_cookie(client):
    """Tester que toutes les routes /tasks exigent une session"""
    assert client.get("/tasks").status_code == 401
    assert client.post("/tasks", json=TASK).status_code == 401
    assert client.get("/tasks/1").status_code == 401
    assert client.put("/tasks/1", json=TASK).status_code == 401
    assert client.delete("/tasks/1").status_code == 401


def test_tasks_invalid_token(client):
    client.cookies.set("token", "not-a-jwt")
    response = client.get("/tasks")
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


# ========== CREATE TASK ==========
def test_create_task_success(alice):
    """Tester la création réussie d'une tâche"""
    data = _create(alice)
    assert data["name"] == "Ma première tâche"
    assert data["description"] == "Écrire le rapport"
    assert data["priority"] == "High"
    assert data["created_at"]
    assert data["updated_at"]


def test_create_task_binds_owner(alice):
    user_id = alice.get("/auth/user").json()["id"]
    data = _create(alice)
    assert data["user_id"] == user_id


def test_create_task_unknown_priority(alice):
    """Tester qu'une priorité hors des 5 niveaux est refusée"""
    response = alice.post("/tasks", json={**TASK, "priority": "Urgent"})
    assert response.status_code == 400
    assert "Priority" in response.json()["detail"]


def test_create_task_missing_fields(alice):
    response = alice.post("/tasks", json={"name": "Sans description"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Name, description, and priority are required"


def test_create_task_every_priority(alice):
    for priority in ["Lowest", "Low", "Normal", "High", "Highest"]:
        assert _create(alice, priority=priority)["priority"] == priority


# ========== LIST TASKS ==========
def test_list_tasks_empty(alice):
    """Tester la liste vide des tâches"""
    response = alice.get("/tasks")
    assert response.status_code == 200
    assert response.json() == []


def test_list_tasks_newest_first(alice):
    """Tester la liste des tâches, plus récente d'abord"""
    for i in range(1, 4):
        _create(alice, name=f"Tâche {i}")

    response = alice.get("/tasks")
    assert response.status_code == 200
    names = [t["name"] for t in response.json()]
    assert names == ["Tâche 3", "Tâche 2", "Tâche 1"]


def test_list_tasks_only_own(alice, bob):
    _create(alice, name="Tâche d'Alice")
    _create(bob, name="Tâche de Bob")

    names = [t["name"] for t in alice.get("/tasks").json()]
    assert names == ["Tâche d'Alice"]


def test_filter_tasks_by_priority(alice):
    """Tester le filtrage par priorité"""
    _create(alice, name="Low", priority="Low")
    _create(alice, name="High 1", priority="High")
    _create(alice, name="High 2", priority="High")

    data = alice.get("/tasks?priority=High").json()
    assert len(data) == 2
    assert all(t["priority"] == "High" for t in data)


# ========== GET TASK ==========
def test_get_task(alice):
    task_id = _create(alice)["id"]
    response = alice.get(f"/tasks/{task_id}")
    assert response.status_code == 200
    assert response.json()["id"] == task_id


def test_get_task_not_found(alice):
    response = alice.get("/tasks/12345")
    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found"


# ========== UPDATE TASK ==========
def test_update_task_success(alice):
    """Tester la modification d'une tâche"""
    task_id = _create(alice, name="Tâche originale", priority="Low")["id"]

    response = alice.put(
        f"/tasks/{task_id}",
        json={"name": "Tâche modifiée", "description": "Nouvelle description", "priority": "Highest"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Tâche modifiée"
    assert data["priority"] == "Highest"


def test_update_task_missing_fields(alice):
    task_id = _create(alice)["id"]
    response = alice.put(f"/tasks/{task_id}", json={"name": "Seulement un nom"})
    assert response.status_code == 400


def test_update_task_not_found(alice):
    response = alice.put("/tasks/12345", json=TASK)
    assert response.status_code == 404


# ========== DELETE TASK ==========
def test_delete_task_success(alice):
    """Tester la suppression d'une tâche"""
    task_id = _create(alice, name="À supprimer")["id"]

    response = alice.delete(f"/tasks/{task_id}")
    assert response.status_code == 204

    assert alice.get("/tasks").json() == []
    assert alice.get(f"/tasks/{task_id}").status_code == 404


def test_delete_task_twice(alice):
    """Tester qu'une seconde suppression renvoie 404 sans planter"""
    task_id = _create(alice)["id"]
    assert alice.delete(f"/tasks/{task_id}").status_code == 204
    assert alice.delete(f"/tasks/{task_id}").status_code == 404
    assert alice.delete(f"/tasks/{task_id}").status_code == 404


# ========== OWNERSHIP ==========
def test_other_user_cannot_access_task(alice, bob):
    """Tester qu'un autre utilisateur reçoit 404 sur la tâche d'Alice"""
    task_id = _create(alice)["id"]

    assert bob.get(f"/tasks/{task_id}").status_code == 404
    assert bob.put(f"/tasks/{task_id}", json={**TASK, "name": "Piratée"}).status_code == 404
    assert bob.delete(f"/tasks/{task_id}").status_code == 404

    # La tâche d'Alice est intacte
    response = alice.get(f"/tasks/{task_id}")
    assert response.status_code == 200
    assert response.json()["name"] == TASK["name"]


def test_foreign_and_missing_task_look_the_same(alice, bob):
    task_id = _create(alice)["id"]

    foreign = bob.get(f"/tasks/{task_id}")
    missing = bob.get("/tasks/99999")
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()


def test_list_tasks_unknown_priority(alice):
    _create(alice)
    response = alice.get("/tasks?priority=Urgent")
    assert response.status_code == 400
    assert "Priority" in response.json()["detail"]


def test_out_of_range_task_id(alice):
    """Tester qu'un id hors limites donne 404 et pas 500"""
    task_id = 99999999999999999999

    assert alice.get(f"/tasks/{task_id}").status_code == 404
    assert alice.put(f"/tasks/{task_id}", json=TASK).status_code == 404
    assert alice.delete(f"/tasks/{task_id}").status_code == 404
