"""Tests for the user routes and role assignments."""

from conftest import student_payload, teacher_payload


def test_create_user_defaults_clerk_id_to_id(client):
    response = client.post("/api/users", json={"id": "user_abc", "name": "Alice"})

    assert response.status_code == 201
    user = response.json()
    assert user["id"] == "user_abc"
    assert user["clerk_id"] == "user_abc"
    assert user["is_active"] is True
    assert user["student"] is None
    assert user["roles"] == []


def test_create_user_keeps_explicit_clerk_id(client):
    user = client.post("/api/users", json={"id": "local-1", "clerk_id": "user_xyz"}).json()

    assert user["clerk_id"] == "user_xyz"


def test_duplicate_user_id_returns_409(client, make_user):
    make_user("user_abc")

    response = client.post("/api/users", json={"id": "user_abc"})

    assert response.status_code == 409
    assert response.json()["detail"] == "User 'user_abc' already exists"


def test_create_user_without_id_returns_400(client):
    response = client.post("/api/users", json={"name": "Nobody"})

    assert response.status_code == 400
    assert response.json()["detail"] == "id: Field required"


def test_get_unknown_user_returns_404(client):
    response = client.get("/api/users/missing")

    assert response.status_code == 404
    assert response.json()["detail"] == "User 'missing' not found"


def test_update_user_changes_only_given_fields(client, make_user):
    make_user("user_abc", name="Alice", email="alice@mail.com")

    response = client.put("/api/users", json={"id": "user_abc", "data": {"phone": "0812"}})

    assert response.status_code == 200
    user = response.json()
    assert user["phone"] == "0812"
    assert user["name"] == "Alice"
    assert user["email"] == "alice@mail.com"


def test_update_user_rejects_unknown_field(client, make_user):
    make_user("user_abc")

    response = client.put("/api/users", json={"id": "user_abc", "data": {"password": "x"}})

    assert response.status_code == 400
    assert response.json()["detail"] == "data.password: Extra inputs are not permitted"


def test_update_unknown_user_returns_404(client):
    response = client.put("/api/users", json={"id": "missing", "data": {"name": "x"}})

    assert response.status_code == 404


def test_list_users_includes_profile_references(client, make_student):
    student = make_student("user_student01")
    client.post("/api/users", json={"id": "user_admin1"})

    users = {u["id"]: u for u in client.get("/api/users").json()}

    assert users["user_student01"]["student"] == {"id": student["id"]}
    assert users["user_admin1"]["student"] is None


def test_assign_and_revoke_role(client, make_user):
    make_user("user_abc")
    role = client.post(
        "/api/role", json={"name": "admin", "description": "Admin", "permissions": ["*"]}
    ).json()

    assigned = client.post("/api/users/user_abc/roles", json={"role_id": role["id"]})
    assert assigned.status_code == 201
    assert assigned.json()["roles"] == [{"id": role["id"], "name": "admin"}]

    again = client.post("/api/users/user_abc/roles", json={"role_id": role["id"]})
    assert again.status_code == 409

    revoked = client.delete(f"/api/users/user_abc/roles/{role['id']}")
    assert revoked.status_code == 200
    assert client.get("/api/users/user_abc").json()["roles"] == []

    assert client.delete(f"/api/users/user_abc/roles/{role['id']}").status_code == 404


def test_assign_unknown_role_returns_404(client, make_user):
    make_user("user_abc")

    response = client.post("/api/users/user_abc/roles", json={"role_id": "nope"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Role 'nope' not found"


def test_delete_user_cascades_to_profiles(client, make_user, reference_data):
    make_user("user_student01")
    student = client.post(
        "/api/students", json=student_payload(reference_data, "user_student01")
    ).json()
    make_user("user_parent01")
    parent = client.post(
        "/api/parents",
        json={"user_id": "user_parent01", "student_id": student["id"], "name": "Ibu Siswa", "relation": "Ibu"},
    ).json()
    make_user("user_teacher1")
    client.post("/api/teachers", json=teacher_payload("user_teacher1"))

    response = client.request("DELETE", "/api/users", json={"id": "user_student01"})

    assert response.status_code == 200
    assert client.get("/api/users/user_student01").status_code == 404
    assert client.get("/api/students").json() == []
    parents = client.get("/api/parents").json()
    assert [p["id"] for p in parents] == [parent["id"]]
    assert parents[0]["student_id"] is None

    client.request("DELETE", "/api/users", json={"id": "user_teacher1"})
    assert client.get("/api/teachers").json() == []

    client.request("DELETE", "/api/users", json={"id": "user_parent01"})
    assert client.get("/api/parents").json() == []
    assert client.get("/api/users").json() == []


def test_delete_unknown_user_returns_404(client):
    response = client.request("DELETE", "/api/users", json={"id": "missing"})

    assert response.status_code == 404


def test_delete_requires_id(client):
    response = client.request("DELETE", "/api/users", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == "id: Field required"
