"""Tests for violation types, violations and student points."""

import pytest


@pytest.fixture
def violation_types(client):
    late = client.post(
        "/api/violation-types", json={"name": "Terlambat", "category": "ringan", "points": 5}
    ).json()
    fight = client.post(
        "/api/violation-types", json={"name": "Berkelahi", "category": "berat", "points": 50}
    ).json()
    return {"late": late, "fight": fight}


def _violation(student, reference_data, type_id, **extra):
    return {
        "student_id": student["id"],
        "violation_type_id": type_id,
        "class_id": reference_data["class_id"],
        "reported_by": "Budi Santoso",
        "date": "2025-08-01",
        **extra,
    }


def test_duplicate_violation_type_returns_409(client, violation_types):
    response = client.post(
        "/api/violation-types", json={"name": "Terlambat", "category": "ringan", "points": 1}
    )

    assert response.status_code == 409


def test_record_violation(client, make_student, reference_data, violation_types):
    student = make_student()

    response = client.post(
        "/api/violations", json=_violation(student, reference_data, violation_types["late"]["id"])
    )

    assert response.status_code == 201
    violation = response.json()
    assert violation["status"] == "active"
    assert violation["date"] == "2025-08-01"
    assert violation["violation_type"]["points"] == 5
    assert violation["student"]["name"] == "Siswa 01"
    assert violation["class"]["name"] == "X TKJ 1"


def test_invalid_status_returns_400(client, make_student, reference_data, violation_types):
    student = make_student()

    response = client.post(
        "/api/violations",
        json=_violation(student, reference_data, violation_types["late"]["id"], status="forgotten"),
    )

    assert response.status_code == 400


def test_points_exclude_dismissed(client, make_student, reference_data, violation_types):
    student = make_student()
    client.post("/api/violations", json=_violation(student, reference_data, violation_types["late"]["id"]))
    fight = client.post(
        "/api/violations", json=_violation(student, reference_data, violation_types["fight"]["id"])
    ).json()

    assert client.get(f"/api/students/{student['id']}/points").json()["points"] == 55

    client.put("/api/violations", json={"id": fight["id"], "status": "dismissed"})

    assert client.get(f"/api/students/{student['id']}/points").json() == {
        "student_id": student["id"],
        "points": 5,
    }


def test_points_for_unknown_student_returns_404(client):
    assert client.get("/api/students/missing/points").status_code == 404


def test_list_by_student(client, make_student, reference_data, violation_types):
    first = make_student("user_student01", "01")
    second = make_student("user_student02", "02")
    client.post("/api/violations", json=_violation(first, reference_data, violation_types["late"]["id"]))
    client.post("/api/violations", json=_violation(second, reference_data, violation_types["late"]["id"]))

    assert len(client.get("/api/violations").json()) == 2
    only_first = client.get("/api/violations", params={"student_id": first["id"]}).json()
    assert [v["student_id"] for v in only_first] == [first["id"]]


def test_deleting_student_removes_violations(client, make_student, reference_data, violation_types):
    student = make_student()
    client.post("/api/violations", json=_violation(student, reference_data, violation_types["late"]["id"]))

    client.request("DELETE", "/api/students", json={"id": student["id"]})

    assert client.get("/api/violations").json() == []


def test_used_violation_type_cannot_be_deleted(client, make_student, reference_data, violation_types):
    student = make_student()
    client.post("/api/violations", json=_violation(student, reference_data, violation_types["late"]["id"]))

    response = client.request("DELETE", "/api/violation-types", json={"id": violation_types["late"]["id"]})

    assert response.status_code == 409
