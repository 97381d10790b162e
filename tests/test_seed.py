"""Tests for the database seed."""

from datetime import date

from models import (
    AcademicYearModel,
    ParentModel,
    RoleModel,
    StudentModel,
    SubjectModel,
    TeacherModel,
    UserModel,
    UserRoleModel,
)
from seed import seed_database


def _counts(db):
    return {
        model.__tablename__: db.query(model).count()
        for model in (RoleModel, UserModel, StudentModel, ParentModel, TeacherModel, SubjectModel, UserRoleModel)
    }


def test_seed_creates_demo_data(db_session):
    seed_database(db_session, today=date(2025, 3, 1))

    assert _counts(db_session) == {
        "roles": 4,
        "users": 32,
        "students": 15,
        "parents": 15,
        "teachers": 1,
        "subjects": 6,
        "user_roles": 32,
    }
    year = db_session.query(AcademicYearModel).one()
    assert year.year == "2025/2026"
    assert year.is_active is True
    parent = db_session.query(ParentModel).filter_by(user_id="user_parent02").one()
    assert parent.relation == "Ayah"
    assert parent.student.user_id == "user_student02"


def test_seed_is_idempotent(db_session):
    seed_database(db_session, today=date(2025, 3, 1))
    first = _counts(db_session)

    seed_database(db_session, today=date(2025, 3, 1))

    assert _counts(db_session) == first


def test_seed_with_clear_starts_over(db_session):
    seed_database(db_session, today=date(2025, 3, 1))
    db_session.add(RoleModel(id="role_extra", name="extra", description="Extra", permissions=[]))
    db_session.commit()

    seed_database(db_session, clear=True, today=date(2025, 3, 1))

    assert db_session.query(RoleModel).count() == 4


def test_seeded_data_is_served(client, db_session):
    seed_database(db_session, today=date(2025, 3, 1))

    students = client.get("/api/students").json()
    assert len(students) == 15
    assert {s["class"]["name"] for s in students} == {"X TKJ 1"}
    admin = client.get("/api/users/user_admin1").json()
    assert [r["name"] for r in admin["roles"]] == ["admin"]
