"""Major routes."""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import MajorManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.reference import MajorCreate, MajorUpdate, MajorOut

router = APIRouter(prefix="/api/majors", tags=["Majors"])


@router.get("", response_model=List[MajorOut], summary="List majors")
def list_majors(manager: MajorManagerDep) -> List[MajorOut]:
    return manager.list()


@router.post(
    "", response_model=MajorOut, status_code=status.HTTP_201_CREATED, summary="Create a major"
)
def create_major(req: MajorCreate, manager: MajorManagerDep) -> MajorOut:
    return manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=MajorOut, summary="Update a major")
def update_major(req: MajorUpdate, manager: MajorManagerDep) -> MajorOut:
    return manager.update(req.id, req.model_dump(exclude_unset=True, exclude={"id"}))


@router.delete("", response_model=MessageResponse, summary="Delete a major")
def delete_major(req: DeleteRequest, manager: MajorManagerDep) -> MessageResponse:
    manager.delete(req.id)
    return MessageResponse(message="Major deleted successfully")
