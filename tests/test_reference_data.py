"""Tests for majors, academic years, classes and subjects."""


def test_major_crud(client):
    created = client.post("/api/majors", json={"code": "RPL", "name": "Rekayasa Perangkat Lunak"})
    assert created.status_code == 201
    major = created.json()

    updated = client.put("/api/majors", json={"id": major["id"], "description": "Jurusan Pemrograman"})
    assert updated.json()["description"] == "Jurusan Pemrograman"
    assert updated.json()["code"] == "RPL"

    assert client.post("/api/majors", json={"code": "RPL", "name": "Duplicate"}).status_code == 409

    deleted = client.request("DELETE", "/api/majors", json={"id": major["id"]})
    assert deleted.status_code == 200
    assert client.get("/api/majors").json() == []


def test_only_one_academic_year_is_active(client):
    first = client.post(
        "/api/academic-years",
        json={"year": "2024/2025", "start_date": "2024-07-15", "end_date": "2025-06-15", "is_active": True},
    ).json()
    second = client.post(
        "/api/academic-years",
        json={"year": "2025/2026", "start_date": "2025-07-15", "end_date": "2026-06-15", "is_active": True},
    ).json()

    years = {y["id"]: y for y in client.get("/api/academic-years").json()}
    assert years[first["id"]]["is_active"] is False
    assert years[second["id"]]["is_active"] is True

    client.put("/api/academic-years", json={"id": first["id"], "is_active": True})
    years = {y["id"]: y for y in client.get("/api/academic-years").json()}
    assert years[first["id"]]["is_active"] is True
    assert years[second["id"]]["is_active"] is False


def test_academic_year_validation(client):
    bad_format = client.post(
        "/api/academic-years",
        json={"year": "2025", "start_date": "2025-07-15", "end_date": "2026-06-15"},
    )
    assert bad_format.status_code == 400

    reversed_dates = client.post(
        "/api/academic-years",
        json={"year": "2025/2026", "start_date": "2026-07-15", "end_date": "2026-06-15"},
    )
    assert reversed_dates.status_code == 400


def test_academic_year_update_checks_dates(client):
    year = client.post(
        "/api/academic-years",
        json={"year": "2025/2026", "start_date": "2025-07-15", "end_date": "2026-06-15"},
    ).json()

    response = client.put("/api/academic-years", json={"id": year["id"], "end_date": "2025-01-01"})

    assert response.status_code == 400
    assert response.json()["detail"] == "end_date must be after start_date"


def test_class_requires_existing_major(client):
    response = client.post("/api/classes", json={"name": "X RPL 1", "grade": 10, "major_id": "none"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Major 'none' does not exist"


def test_class_grade_range(client):
    assert client.post("/api/classes", json={"name": "X", "grade": 13}).status_code == 400


def test_referenced_class_cannot_be_deleted(client, make_student, reference_data):
    make_student()

    response = client.request("DELETE", "/api/classes", json={"id": reference_data["class_id"]})

    assert response.status_code == 409
    assert len(client.get("/api/classes").json()) == 1


def test_referenced_major_cannot_be_deleted(client, reference_data):
    response = client.request("DELETE", "/api/majors", json={"id": reference_data["major_id"]})

    assert response.status_code == 409


def test_subject_crud(client, reference_data):
    created = client.post(
        "/api/subjects", json={"code": "TKJ", "name": "Teknik Komputer", "credits": 4, "major_id": reference_data["major_id"]}
    )
    assert created.status_code == 201

    codes = [s["code"] for s in client.get("/api/subjects").json()]
    assert codes == ["MTK", "TKJ"]

    updated = client.put("/api/subjects", json={"id": created.json()["id"], "credits": 6})
    assert updated.json()["credits"] == 6

    assert client.request("DELETE", "/api/subjects", json={"id": created.json()["id"]}).status_code == 200
