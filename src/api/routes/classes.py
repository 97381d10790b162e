"""Class routes."""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import ClassManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.reference import ClassCreate, ClassUpdate, ClassOut

router = APIRouter(prefix="/api/classes", tags=["Classes"])


@router.get("", response_model=List[ClassOut], summary="List classes")
def list_classes(manager: ClassManagerDep) -> List[ClassOut]:
    return manager.list()


@router.post(
    "", response_model=ClassOut, status_code=status.HTTP_201_CREATED, summary="Create a class"
)
def create_class(req: ClassCreate, manager: ClassManagerDep) -> ClassOut:
    return manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=ClassOut, summary="Update a class")
def update_class(req: ClassUpdate, manager: ClassManagerDep) -> ClassOut:
    return manager.update(req.id, req.model_dump(exclude_unset=True, exclude={"id"}))


@router.delete("", response_model=MessageResponse, summary="Delete a class")
def delete_class(req: DeleteRequest, manager: ClassManagerDep) -> MessageResponse:
    manager.delete(req.id)
    return MessageResponse(message="Class deleted successfully")
