"""Tests for the role routes."""


def test_role_lifecycle(client):
    created = client.post(
        "/api/role",
        json={"name": "librarian", "description": "Library staff", "permissions": ["books:read", "books:write"]},
    )
    assert created.status_code == 201
    role = created.json()
    assert role["name"] == "librarian"
    assert role["permissions"] == ["books:read", "books:write"]

    listed = client.get("/api/role").json()
    assert [r["name"] for r in listed] == ["librarian"]

    updated = client.put("/api/role", json={"id": role["id"], "description": "Librarians"})
    assert updated.status_code == 200
    assert updated.json()["description"] == "Librarians"
    assert updated.json()["permissions"] == ["books:read", "books:write"]

    deleted = client.request("DELETE", "/api/role", json={"id": role["id"]})
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Role deleted successfully"}
    assert client.get("/api/role").json() == []


def test_create_role_missing_fields_returns_400(client):
    response = client.post("/api/role", json={"name": "librarian"})

    assert response.status_code == 400
    assert response.json()["detail"] == "description: Field required"
    fields = [error["field"] for error in response.json()["errors"]]
    assert fields == ["description", "permissions"]
    assert client.get("/api/role").json() == []


def test_duplicate_role_name_returns_409(client):
    body = {"name": "admin", "description": "System Administrator", "permissions": []}
    assert client.post("/api/role", json=body).status_code == 201

    response = client.post("/api/role", json=body)

    assert response.status_code == 409
    assert response.json()["detail"] == "Role 'admin' already exists"
    assert len(client.get("/api/role").json()) == 1


def test_update_unknown_role_returns_404(client):
    response = client.put("/api/role", json={"id": "missing", "name": "x"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Role 'missing' not found"


def test_update_rejects_unknown_field(client):
    role = client.post(
        "/api/role", json={"name": "staff", "description": "Staff", "permissions": []}
    ).json()

    response = client.put("/api/role", json={"id": role["id"], "owner": "someone"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("owner:")


def test_assigned_role_cannot_be_deleted(client, make_user):
    role = client.post(
        "/api/role", json={"name": "teacher", "description": "Teaching Staff", "permissions": []}
    ).json()
    make_user("user_1")
    client.post("/api/users/user_1/roles", json={"role_id": role["id"]})

    response = client.request("DELETE", "/api/role", json={"id": role["id"]})

    assert response.status_code == 409
    assert len(client.get("/api/role").json()) == 1
