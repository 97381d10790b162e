"""Violation routes."""

from typing import List, Optional

from fastapi import APIRouter, status

from core.dependencies import ViolationManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.violation import ViolationCreate, ViolationOut, ViolationUpdate

router = APIRouter(prefix="/api/violations", tags=["Violations"])


@router.get("", response_model=List[ViolationOut], summary="List violations")
def list_violations(
    manager: ViolationManagerDep, student_id: Optional[str] = None
) -> List[ViolationOut]:
    """List violations with student, type and class, newest first.

    Args:
        manager: Injected ViolationManager instance.
        student_id: Optional filter to one student.
    """
    return manager.list(student_id=student_id)


@router.post(
    "",
    response_model=ViolationOut,
    status_code=status.HTTP_201_CREATED,
    summary="Record a violation",
)
def create_violation(req: ViolationCreate, manager: ViolationManagerDep) -> ViolationOut:
    return manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=ViolationOut, summary="Update a violation")
def update_violation(req: ViolationUpdate, manager: ViolationManagerDep) -> ViolationOut:
    return manager.update(req.id, req.model_dump(exclude_unset=True, exclude={"id"}))


@router.delete("", response_model=MessageResponse, summary="Delete a violation")
def delete_violation(req: DeleteRequest, manager: ViolationManagerDep) -> MessageResponse:
    manager.delete(req.id)
    return MessageResponse(message="Violation deleted successfully")
