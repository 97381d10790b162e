"""Parent management routes."""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import ParentManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.parent import ParentCreate, ParentOut, ParentUpdateRequest

router = APIRouter(prefix="/api/parents", tags=["Parents"])


@router.get("", response_model=List[ParentOut], summary="List parents")
def list_parents(parent_manager: ParentManagerDep) -> List[ParentOut]:
    return parent_manager.list()


@router.post(
    "", response_model=ParentOut, status_code=status.HTTP_201_CREATED, summary="Create a parent"
)
def create_parent(req: ParentCreate, parent_manager: ParentManagerDep) -> ParentOut:
    return parent_manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=ParentOut, summary="Update a parent")
def update_parent(req: ParentUpdateRequest, parent_manager: ParentManagerDep) -> ParentOut:
    return parent_manager.update(req.id, req.data.model_dump(exclude_unset=True))


@router.delete("", response_model=MessageResponse, summary="Delete a parent")
def delete_parent(req: DeleteRequest, parent_manager: ParentManagerDep) -> MessageResponse:
    parent_manager.delete(req.id)
    return MessageResponse(message="Parent deleted successfully")
