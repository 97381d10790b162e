"""Violation type routes."""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import ViolationTypeManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.violation import ViolationTypeCreate, ViolationTypeOut, ViolationTypeUpdate

router = APIRouter(prefix="/api/violation-types", tags=["Violations"])


@router.get("", response_model=List[ViolationTypeOut], summary="List violation types")
def list_violation_types(manager: ViolationTypeManagerDep) -> List[ViolationTypeOut]:
    return manager.list()


@router.post(
    "",
    response_model=ViolationTypeOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a violation type",
)
def create_violation_type(
    req: ViolationTypeCreate, manager: ViolationTypeManagerDep
) -> ViolationTypeOut:
    return manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=ViolationTypeOut, summary="Update a violation type")
def update_violation_type(
    req: ViolationTypeUpdate, manager: ViolationTypeManagerDep
) -> ViolationTypeOut:
    return manager.update(req.id, req.model_dump(exclude_unset=True, exclude={"id"}))


@router.delete("", response_model=MessageResponse, summary="Delete a violation type")
def delete_violation_type(
    req: DeleteRequest, manager: ViolationTypeManagerDep
) -> MessageResponse:
    """Delete a violation type no violation refers to."""
    manager.delete(req.id)
    return MessageResponse(message="Violation type deleted successfully")
