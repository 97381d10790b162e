"""Tests for the schedule routes."""

import pytest


@pytest.fixture
def schedule_body(make_teacher, reference_data):
    teacher = make_teacher()
    return {
        "class_id": reference_data["class_id"],
        "subject_id": reference_data["subject_id"],
        "teacher_id": teacher["id"],
        "academic_year_id": reference_data["academic_year_id"],
        "day_of_week": 1,
        "start_time": "07:00",
        "end_time": "08:30",
        "room": "Lab 1",
    }


def test_create_schedule_includes_names(client, schedule_body):
    response = client.post("/api/schedules", json=schedule_body)

    assert response.status_code == 201
    schedule = response.json()
    assert schedule["class"]["name"] == "X TKJ 1"
    assert schedule["subject"]["name"] == "Matematika"
    assert schedule["teacher"]["name"] == "Budi Santoso, S.Kom"
    assert schedule["start_time"] == "07:00"


def test_end_time_must_follow_start_time(client, schedule_body):
    schedule_body["end_time"] = "06:00"

    response = client.post("/api/schedules", json=schedule_body)

    assert response.status_code == 400
    assert "end_time must be after start_time" in response.json()["detail"]


@pytest.mark.parametrize("field,value", [("day_of_week", 8), ("start_time", "7am")])
def test_invalid_slot_values_return_400(client, schedule_body, field, value):
    schedule_body[field] = value

    response = client.post("/api/schedules", json=schedule_body)

    assert response.status_code == 400
    assert response.json()["detail"].startswith(f"{field}:")


def test_duplicate_slot_returns_409(client, schedule_body):
    assert client.post("/api/schedules", json=schedule_body).status_code == 201

    response = client.post("/api/schedules", json=schedule_body)

    assert response.status_code == 409


def test_unknown_teacher_returns_400(client, schedule_body):
    schedule_body["teacher_id"] = "nobody"

    response = client.post("/api/schedules", json=schedule_body)

    assert response.status_code == 400
    assert response.json()["detail"] == "Teacher 'nobody' does not exist"


def test_update_checks_merged_time_range(client, schedule_body):
    schedule = client.post("/api/schedules", json=schedule_body).json()

    bad = client.put("/api/schedules", json={"id": schedule["id"], "end_time": "06:30"})
    assert bad.status_code == 400

    good = client.put("/api/schedules", json={"id": schedule["id"], "end_time": "09:00", "room": "R2"})
    assert good.status_code == 200
    assert good.json()["end_time"] == "09:00"
    assert good.json()["start_time"] == "07:00"
    assert good.json()["room"] == "R2"


def test_list_filters_and_ordering(client, schedule_body, reference_data):
    client.post("/api/schedules", json={**schedule_body, "day_of_week": 3})
    client.post("/api/schedules", json={**schedule_body, "day_of_week": 1, "start_time": "10:00", "end_time": "11:00"})
    client.post("/api/schedules", json=schedule_body)

    listed = client.get("/api/schedules").json()
    assert [(s["day_of_week"], s["start_time"]) for s in listed] == [(1, "07:00"), (1, "10:00"), (3, "07:00")]

    by_class = client.get("/api/schedules", params={"class_id": reference_data["class_id"]}).json()
    assert len(by_class) == 3
    assert client.get("/api/schedules", params={"teacher_id": "other"}).json() == []


def test_deleting_teacher_removes_schedules(client, schedule_body):
    client.post("/api/schedules", json=schedule_body)

    client.request("DELETE", "/api/teachers", json={"id": schedule_body["teacher_id"]})

    assert client.get("/api/schedules").json() == []
