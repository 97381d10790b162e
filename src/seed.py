"""Seed the database with reference data and demo accounts.

Every record is looked up by its natural key first, so running the script
twice leaves the database unchanged. Pass ``--clear`` (or run with
APP_ENV=development) to empty all tables before seeding.

Usage:
    python seed.py [--clear]
"""

import logging
import sys
from datetime import date
from typing import Any, Dict, Type

from sqlalchemy.orm import Session

from config import APP_ENV
from core.database import SessionLocal
from core.logging_config import setup_logging
from models import (
    AcademicYearModel,
    ClassModel,
    MajorModel,
    ParentModel,
    RoleModel,
    ScheduleModel,
    StudentModel,
    SubjectModel,
    TeacherModel,
    UserModel,
    UserRoleModel,
    ViolationModel,
    ViolationTypeModel,
)
from utils.crud_manager import new_id

logger = logging.getLogger(__name__)

# Children before parents
CLEAR_ORDER = [
    ViolationModel,
    ViolationTypeModel,
    ScheduleModel,
    ParentModel,
    StudentModel,
    TeacherModel,
    ClassModel,
    SubjectModel,
    MajorModel,
    AcademicYearModel,
    UserRoleModel,
    UserModel,
    RoleModel,
]

ROLES = [
    {"id": "role_admin", "name": "admin", "description": "System Administrator"},
    {"id": "role_teacher", "name": "teacher", "description": "Teaching Staff"},
    {"id": "role_student", "name": "student", "description": "Student"},
    {"id": "role_parent", "name": "parent", "description": "Student Parent"},
]

MAJORS = [
    {"code": "TKJ", "name": "Teknik Komputer dan Jaringan", "description": "Jurusan Teknologi Informasi"},
    {"code": "MM", "name": "Multimedia", "description": "Jurusan Desain Digital"},
    {"code": "RPL", "name": "Rekayasa Perangkat Lunak", "description": "Jurusan Pemrograman"},
]

# (code, name, credits, major code or None for shared subjects)
SUBJECTS = [
    ("MTK", "Matematika", 4, None),
    ("BIN", "Bahasa Indonesia", 3, None),
    ("BIG", "Bahasa Inggris", 3, None),
    ("PKWU", "Prakarya", 2, None),
    ("TKJ", "Teknik Komputer", 4, "TKJ"),
    ("MMD", "Desain Multimedia", 4, "MM"),
]

CLASSES = [
    {"name": "X TKJ 1", "grade": 10, "major_code": "TKJ", "capacity": 36},
    {"name": "XI MM 1", "grade": 11, "major_code": "MM", "capacity": 32},
    {"name": "XII RPL 1", "grade": 12, "major_code": "RPL", "capacity": 30},
]

STUDENT_COUNT = 15
CITIES = ["Jakarta", "Bandung", "Surabaya"]


def _get_or_create(db: Session, model: Type[Any], lookup: Dict[str, Any], values: Dict[str, Any]):
    """Return the row matching ``lookup``, inserting it with ``values`` if absent."""
    existing = db.query(model).filter_by(**lookup).first()
    if existing is not None:
        return existing
    row = model(**{"id": new_id(), **lookup, **values})
    db.add(row)
    db.flush()
    return row


def _grant(db: Session, user_id: str, role_id: str) -> None:
    _get_or_create(db, UserRoleModel, {"user_id": user_id, "role_id": role_id}, {})


def clear_database(db: Session) -> None:
    """Delete every row of every table."""
    for model in CLEAR_ORDER:
        count = db.query(model).delete()
        logger.info("Cleared %s (%d rows)", model.__tablename__, count)
    db.commit()


def seed_database(db: Session, clear: bool = False, today: date = None) -> None:
    """Seed roles, reference data, an admin, a teacher and demo students.

    Args:
        db: Database session.
        clear: Empty all tables first.
        today: Date used to derive the current academic year.
    """
    if clear:
        clear_database(db)

    today = today or date.today()

    logger.info("Seeding roles...")
    for role in ROLES:
        _get_or_create(
            db,
            RoleModel,
            {"id": role["id"]},
            {"name": role["name"], "description": role["description"], "permissions": []},
        )

    year = today.year
    academic_year = _get_or_create(
        db,
        AcademicYearModel,
        {"year": f"{year}/{year + 1}"},
        {
            "start_date": date(year, 7, 15),
            "end_date": date(year + 1, 6, 15),
            "is_active": True,
        },
    )
    logger.info("Seeded academic year: %s", academic_year.year)

    majors = {}
    for major in MAJORS:
        majors[major["code"]] = _get_or_create(
            db,
            MajorModel,
            {"code": major["code"]},
            {"name": major["name"], "description": major["description"]},
        )

    for code, name, credits, major_code in SUBJECTS:
        major_id = majors[major_code].id if major_code else None
        _get_or_create(
            db, SubjectModel, {"code": code}, {"name": name, "credits": credits, "major_id": major_id}
        )

    classes = {}
    for cls in CLASSES:
        classes[cls["name"]] = _get_or_create(
            db,
            ClassModel,
            {"name": cls["name"]},
            {
                "grade": cls["grade"],
                "capacity": cls["capacity"],
                "major_id": majors[cls["major_code"]].id,
                "academic_year_id": academic_year.id,
            },
        )

    logger.info("Seeding admin and teacher...")
    admin = _get_or_create(db, UserModel, {"id": "user_admin1"}, {"clerk_id": "user_admin1"})
    _grant(db, admin.id, "role_admin")

    teacher_user = _get_or_create(
        db, UserModel, {"id": "user_teacher1"}, {"clerk_id": "user_teacher1"}
    )
    _get_or_create(
        db,
        TeacherModel,
        {"user_id": teacher_user.id},
        {
            "employee_id": "198703012022011001",
            "nik": "1234567890123456",
            "name": "Budi Santoso, S.Kom",
            "birth_place": "Jakarta",
            "birth_date": date(1987, 3, 1),
            "address": "Jl. Pendidikan No. 123",
            "gender": "L",
            "position": "Guru Matematika",
            "start_date": date(2022, 1, 1),
        },
    )
    _grant(db, teacher_user.id, "role_teacher")

    logger.info("Seeding students and parents...")
    student_class = classes["X TKJ 1"]
    for i in range(1, STUDENT_COUNT + 1):
        padded = f"{i:02d}"
        city = CITIES[i % len(CITIES)]
        address = f"Jl. Siswa No. {i}, {city}"
        phone = f"0812345678{padded}"

        student_user = _get_or_create(
            db,
            UserModel,
            {"id": f"user_student{padded}"},
            {
                "clerk_id": f"user_student{padded}",
                "username": f"siswa{padded}",
                "email": f"siswa{padded}@mail.com",
                "name": f"Siswa {padded}",
                "phone": phone,
            },
        )
        student = _get_or_create(
            db,
            StudentModel,
            {"user_id": student_user.id},
            {
                "nisn": f"00{padded}23456789",
                "nik": f"12345678901234{padded}",
                "name": f"Siswa {padded}",
                "birth_place": city,
                "birth_date": date(2005 + i % 3, i % 11 + 2, i % 27 + 1),
                "address": address,
                "class_id": student_class.id,
                "academic_year_id": academic_year.id,
                "major_id": majors["TKJ"].id,
                "gender": "L" if i % 2 == 0 else "P",
                "parent_phone": phone,
                "enrollment_date": academic_year.start_date,
            },
        )

        parent_user = _get_or_create(
            db,
            UserModel,
            {"id": f"user_parent{padded}"},
            {
                "clerk_id": f"user_parent{padded}",
                "username": f"ortu{padded}",
                "email": f"ortu{padded}@mail.com",
                "name": f"Orang Tua Siswa {padded}",
                "phone": phone,
            },
        )
        _get_or_create(
            db,
            ParentModel,
            {"user_id": parent_user.id},
            {
                "student_id": student.id,
                "name": f"Orang Tua Siswa {padded}",
                "relation": "Ayah" if i % 2 == 0 else "Ibu",
                "phone": phone,
                "address": address,
            },
        )

        _grant(db, student_user.id, "role_student")
        _grant(db, parent_user.id, "role_parent")

    db.commit()
    logger.info("Database seeded successfully")


def main() -> None:
    """Main entry point."""
    setup_logging()
    clear = "--clear" in sys.argv[1:] or APP_ENV == "development"

    db = SessionLocal()
    try:
        seed_database(db, clear=clear)
    except Exception as e:
        db.rollback()
        logger.error("Seeding failed: %s", e)
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
