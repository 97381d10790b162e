"""Teacher management routes."""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import TeacherManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.teacher import TeacherCreate, TeacherOut, TeacherUpdateRequest

router = APIRouter(prefix="/api/teachers", tags=["Teachers"])


@router.get("", response_model=List[TeacherOut], summary="List teachers")
def list_teachers(teacher_manager: TeacherManagerDep) -> List[TeacherOut]:
    return teacher_manager.list()


@router.post(
    "",
    response_model=TeacherOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a teacher",
)
def create_teacher(req: TeacherCreate, teacher_manager: TeacherManagerDep) -> TeacherOut:
    return teacher_manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=TeacherOut, summary="Update a teacher")
def update_teacher(req: TeacherUpdateRequest, teacher_manager: TeacherManagerDep) -> TeacherOut:
    return teacher_manager.update(req.id, req.data.model_dump(exclude_unset=True))


@router.delete("", response_model=MessageResponse, summary="Delete a teacher")
def delete_teacher(req: DeleteRequest, teacher_manager: TeacherManagerDep) -> MessageResponse:
    """Delete a teacher profile and the schedules it teaches."""
    teacher_manager.delete(req.id)
    return MessageResponse(message="Teacher deleted successfully")
