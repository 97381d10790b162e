"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes,
following Google Python Style Guide and FastAPI best practices.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from utils import file_upload
from utils import identity_provider
from utils import parent_manager
from utils import reference_manager
from utils import role_manager
from utils import schedule_manager
from utils import student_manager
from utils import teacher_manager
from utils import user_manager
from utils import violation_manager

# Singletons for the upstream HTTP clients (they hold a connection pool)
_identity_provider_instance: identity_provider.ClerkClient = None
_file_upload_instance: file_upload.FileUploadClient = None


def get_user_manager(db: Session = Depends(get_db)) -> user_manager.UserManager:
    """Get UserManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        UserManager instance.
    """
    return user_manager.UserManager(db)


def get_role_manager(db: Session = Depends(get_db)) -> role_manager.RoleManager:
    """Get RoleManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        RoleManager instance.
    """
    return role_manager.RoleManager(db)


def get_student_manager(db: Session = Depends(get_db)) -> student_manager.StudentManager:
    """Get StudentManager instance with request-scoped DB session."""
    return student_manager.StudentManager(db)


def get_teacher_manager(db: Session = Depends(get_db)) -> teacher_manager.TeacherManager:
    """Get TeacherManager instance with request-scoped DB session."""
    return teacher_manager.TeacherManager(db)


def get_parent_manager(db: Session = Depends(get_db)) -> parent_manager.ParentManager:
    return parent_manager.ParentManager(db)


def get_schedule_manager(db: Session = Depends(get_db)) -> schedule_manager.ScheduleManager:
    return schedule_manager.ScheduleManager(db)


def get_major_manager(db: Session = Depends(get_db)) -> reference_manager.MajorManager:
    return reference_manager.MajorManager(db)


def get_academic_year_manager(
    db: Session = Depends(get_db),
) -> reference_manager.AcademicYearManager:
    return reference_manager.AcademicYearManager(db)


def get_class_manager(db: Session = Depends(get_db)) -> reference_manager.ClassManager:
    return reference_manager.ClassManager(db)


def get_subject_manager(db: Session = Depends(get_db)) -> reference_manager.SubjectManager:
    return reference_manager.SubjectManager(db)


def get_violation_type_manager(
    db: Session = Depends(get_db),
) -> violation_manager.ViolationTypeManager:
    return violation_manager.ViolationTypeManager(db)


def get_violation_manager(
    db: Session = Depends(get_db),
) -> violation_manager.ViolationManager:
    return violation_manager.ViolationManager(db)


def get_identity_provider() -> identity_provider.ClerkClient:
    """Get ClerkClient singleton instance.

    Returns:
        ClerkClient instance (singleton).
    """
    global _identity_provider_instance
    if _identity_provider_instance is None:
        _identity_provider_instance = identity_provider.ClerkClient()
    return _identity_provider_instance


def get_file_upload_client() -> file_upload.FileUploadClient:
    """Get FileUploadClient singleton instance."""
    global _file_upload_instance
    if _file_upload_instance is None:
        _file_upload_instance = file_upload.FileUploadClient()
    return _file_upload_instance


# Type aliases for dependency injection
UserManagerDep = Annotated[user_manager.UserManager, Depends(get_user_manager)]
RoleManagerDep = Annotated[role_manager.RoleManager, Depends(get_role_manager)]
StudentManagerDep = Annotated[
    student_manager.StudentManager, Depends(get_student_manager)
]
TeacherManagerDep = Annotated[
    teacher_manager.TeacherManager, Depends(get_teacher_manager)
]
ParentManagerDep = Annotated[parent_manager.ParentManager, Depends(get_parent_manager)]
ScheduleManagerDep = Annotated[
    schedule_manager.ScheduleManager, Depends(get_schedule_manager)
]
MajorManagerDep = Annotated[reference_manager.MajorManager, Depends(get_major_manager)]
AcademicYearManagerDep = Annotated[
    reference_manager.AcademicYearManager, Depends(get_academic_year_manager)
]
ClassManagerDep = Annotated[reference_manager.ClassManager, Depends(get_class_manager)]
SubjectManagerDep = Annotated[
    reference_manager.SubjectManager, Depends(get_subject_manager)
]
ViolationTypeManagerDep = Annotated[
    violation_manager.ViolationTypeManager, Depends(get_violation_type_manager)
]
ViolationManagerDep = Annotated[
    violation_manager.ViolationManager, Depends(get_violation_manager)
]
IdentityProviderDep = Annotated[
    identity_provider.ClerkClient, Depends(get_identity_provider)
]
FileUploadClientDep = Annotated[
    file_upload.FileUploadClient, Depends(get_file_upload_client)
]
