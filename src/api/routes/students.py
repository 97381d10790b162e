"""Student management routes."""

from typing import List, Optional

from fastapi import APIRouter, status

from core.dependencies import StudentManagerDep, ViolationManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.student import StudentCreate, StudentOut, StudentUpdateRequest

router = APIRouter(prefix="/api/students", tags=["Students"])


@router.get("", response_model=List[StudentOut], summary="List students")
def list_students(
    student_manager: StudentManagerDep, class_id: Optional[str] = None
) -> List[StudentOut]:
    """List students with their user and class.

    Args:
        student_manager: Injected StudentManager instance.
        class_id: Optional class filter.
    """
    return student_manager.list(class_id=class_id)


@router.get("/{student_id}/points", summary="Total violation points of a student")
def student_points(
    student_id: str,
    student_manager: StudentManagerDep,
    violation_manager: ViolationManagerDep,
) -> dict:
    student_manager.get(student_id)
    return {
        "student_id": student_id,
        "points": violation_manager.total_points(student_id),
    }


@router.post(
    "",
    response_model=StudentOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a student",
)
def create_student(req: StudentCreate, student_manager: StudentManagerDep) -> StudentOut:
    """Create a student profile for an existing user.

    Raises:
        ValidationError: 400 if a referenced user, class, year or major is missing.
        ConflictError: 409 if NISN/NIK is taken or the user already has a profile.
    """
    return student_manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=StudentOut, summary="Update a student")
def update_student(req: StudentUpdateRequest, student_manager: StudentManagerDep) -> StudentOut:
    return student_manager.update(req.id, req.data.model_dump(exclude_unset=True))


@router.delete("", response_model=MessageResponse, summary="Delete a student")
def delete_student(req: DeleteRequest, student_manager: StudentManagerDep) -> MessageResponse:
    student_manager.delete(req.id)
    return MessageResponse(message="Student deleted successfully")
