"""Shared pytest fixtures.

The database is an in-memory SQLite instance, recreated for every test.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app import app
from core.database import SessionLocal, engine
from core.dependencies import get_file_upload_client, get_identity_provider
from core.exceptions import IdentityProviderError
from models.base import Base
from schemas.identity import IdentityRecord


class FakeIdentityProvider:
    """Stands in for ClerkClient; serves a fixed listing."""

    def __init__(self, records=None, error=None):
        self.records = [IdentityRecord.model_validate(r) for r in (records or [])]
        self.error = error
        self.calls = 0

    def list_identity_users(self):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.records)


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    def json(self):
        if self._json is None:
            raise ValueError("No JSON body")
        return self._json


IDENTITY_USERS = [
    {
        "id": "user_alice",
        "first_name": "Alice",
        "last_name": "Wijaya",
        "primary_email_address_id": "idn_2",
        "email_addresses": [
            {"id": "idn_1", "email_address": "alice.old@mail.com"},
            {"id": "idn_2", "email_address": "alice@mail.com"},
        ],
        "image_url": "https://img.example.com/alice.png",
    },
    {
        "id": "user_bob",
        "first_name": "Bob",
        "last_name": None,
        "email_addresses": [{"id": "idn_3", "email_address": "bob@mail.com"}],
    },
]


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def identity_provider():
    provider = FakeIdentityProvider(IDENTITY_USERS)
    app.dependency_overrides[get_identity_provider] = lambda: provider
    return provider


@pytest.fixture
def failing_identity_provider():
    provider = FakeIdentityProvider(
        error=IdentityProviderError("Failed to fetch identity users: Invalid secret key", 401)
    )
    app.dependency_overrides[get_identity_provider] = lambda: provider
    return provider


@pytest.fixture
def override_upload_client():
    def _override(upload_client):
        app.dependency_overrides[get_file_upload_client] = lambda: upload_client
        return upload_client

    return _override


@pytest.fixture
def reference_data(client):
    """A major, an active academic year and a class, created over HTTP."""
    major = client.post("/api/majors", json={"code": "TKJ", "name": "Teknik Komputer dan Jaringan"})
    year = client.post(
        "/api/academic-years",
        json={"year": "2025/2026", "start_date": "2025-07-15", "end_date": "2026-06-15", "is_active": True},
    )
    cls = client.post(
        "/api/classes",
        json={"name": "X TKJ 1", "grade": 10, "major_id": major.json()["id"], "academic_year_id": year.json()["id"]},
    )
    subject = client.post("/api/subjects", json={"code": "MTK", "name": "Matematika", "credits": 4})
    return {
        "major_id": major.json()["id"],
        "academic_year_id": year.json()["id"],
        "class_id": cls.json()["id"],
        "subject_id": subject.json()["id"],
    }


def student_payload(reference_data, user_id, suffix="01"):
    return {
        "user_id": user_id,
        "nisn": f"00{suffix}23456789",
        "birth_place": "Bandung",
        "birth_date": "2007-05-01",
        "nik": f"12345678901234{suffix}",
        "address": "Jl. Siswa No. 1",
        "class_id": reference_data["class_id"],
        "academic_year_id": reference_data["academic_year_id"],
        "enrollment_date": "2025-07-15",
        "gender": "P",
        "graduation_date": "2028-06-15",
        "major_id": reference_data["major_id"],
        "parent_phone": "081234567801",
        "name": f"Siswa {suffix}",
    }


def teacher_payload(user_id):
    return {
        "user_id": user_id,
        "employee_id": "198703012022011001",
        "name": "Budi Santoso, S.Kom",
        "nik": "1234567890123456",
        "birth_place": "Jakarta",
        "birth_date": "1987-03-01",
        "address": "Jl. Pendidikan No. 123",
        "position": "Guru Matematika",
    }


@pytest.fixture
def make_user(client):
    def _make(user_id, **fields):
        response = client.post("/api/users", json={"id": user_id, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_student(client, make_user, reference_data):
    def _make(user_id="user_student01", suffix="01"):
        make_user(user_id)
        response = client.post("/api/students", json=student_payload(reference_data, user_id, suffix))
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_teacher(client, make_user):
    def _make(user_id="user_teacher1"):
        make_user(user_id)
        response = client.post("/api/teachers", json=teacher_payload(user_id))
        assert response.status_code == 201, response.text
        return response.json()

    return _make
