"""Tests for SchoolAdminClient against the application."""

import pytest

from client.api_client import ApiClientError, SchoolAdminClient
from client.query_cache import QueryCache


@pytest.fixture
def api(client):
    return SchoolAdminClient("http://testserver", cache=QueryCache(), session=client)


def test_list_is_cached_until_a_mutation(api, client):
    assert api.list("roles") == []

    # Written behind the client's back: the cached listing is still served
    client.post("/api/role", json={"name": "admin", "description": "Admin", "permissions": []})
    assert api.list("roles") == []

    api.create("roles", {"name": "teacher", "description": "Teaching Staff", "permissions": []})
    assert sorted(r["name"] for r in api.list("roles")) == ["admin", "teacher"]


def test_flat_and_nested_updates(api, reference_data):
    major = api.create("majors", {"code": "MM", "name": "Multimedia"})
    updated = api.update("majors", major["id"], {"description": "Desain"})
    assert updated["description"] == "Desain"

    api.create("users", {"id": "user_abc"})
    user = api.update("users", "user_abc", {"name": "Alice"})
    assert user["name"] == "Alice"
    assert api.get_user("user_abc")["name"] == "Alice"


def test_user_deletion_refreshes_student_listing(api, make_student):
    make_student("user_student01")
    assert len(api.list("students")) == 1

    api.delete("users", "user_student01")

    assert api.list("students") == []


def test_filters_are_cached_separately(api, make_student, reference_data):
    make_student()

    assert len(api.list("students", class_id=reference_data["class_id"])) == 1
    assert api.list("students", class_id="other") == []
    assert len(api.list("students", class_id=None)) == 1


def test_errors_carry_status_and_detail(api):
    api.create("roles", {"name": "admin", "description": "Admin", "permissions": []})

    with pytest.raises(ApiClientError) as excinfo:
        api.create("roles", {"name": "admin", "description": "Admin", "permissions": []})

    assert excinfo.value.status_code == 409
    assert excinfo.value.message == "Role 'admin' already exists"


def test_unknown_resource(api):
    with pytest.raises(ValueError):
        api.list("payments")


def test_role_assignment_invalidates_users(api):
    role = api.create("roles", {"name": "admin", "description": "Admin", "permissions": []})
    api.create("users", {"id": "user_abc"})
    assert api.get_user("user_abc")["roles"] == []

    api.assign_role("user_abc", role["id"])
    assert [r["name"] for r in api.get_user("user_abc")["roles"]] == ["admin"]

    api.revoke_role("user_abc", role["id"])
    assert api.get_user("user_abc")["roles"] == []


def test_get_user_rows_reconciles(api, identity_provider):
    api.create("users", {"id": "user_alice"})
    api.create("users", {"id": "local-1", "clerk_id": "user_missing"})

    rows = {row.user_id: row for row in api.get_user_rows()}

    assert rows["user_alice"].name == "Alice Wijaya"
    assert rows["user_alice"].identity_label == "Clerk User"
    assert rows["local-1"].identity_label == "No Clerk"
    assert rows["local-1"].email == "-"


def test_student_points(api, make_student):
    student = make_student()

    assert api.get_student_points(student["id"]) == 0


def test_get_user_rows_sees_upstream_changes(api, identity_provider):
    api.create("users", {"id": "user_alice"})
    (row,) = api.get_user_rows()
    assert row.identity_label == "Clerk User"

    # Account removed from the provider between two page loads
    identity_provider.records = []
    (row,) = api.get_user_rows()

    assert row.identity_label == "No Clerk"
    assert row.email == "-"
    assert identity_provider.calls == 2


def test_identity_listing_is_cached_without_refresh(api, identity_provider):
    api.get_identity_users()
    api.get_identity_users()
    assert identity_provider.calls == 1

    api.get_identity_users(refresh=True)
    assert identity_provider.calls == 2
