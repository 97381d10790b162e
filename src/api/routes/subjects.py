"""Subject routes."""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import SubjectManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.reference import SubjectCreate, SubjectUpdate, SubjectOut

router = APIRouter(prefix="/api/subjects", tags=["Subjects"])


@router.get("", response_model=List[SubjectOut], summary="List subjects")
def list_subjects(manager: SubjectManagerDep) -> List[SubjectOut]:
    return manager.list()


@router.post(
    "", response_model=SubjectOut, status_code=status.HTTP_201_CREATED, summary="Create a subject"
)
def create_subject(req: SubjectCreate, manager: SubjectManagerDep) -> SubjectOut:
    return manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=SubjectOut, summary="Update a subject")
def update_subject(req: SubjectUpdate, manager: SubjectManagerDep) -> SubjectOut:
    return manager.update(req.id, req.model_dump(exclude_unset=True, exclude={"id"}))


@router.delete("", response_model=MessageResponse, summary="Delete a subject")
def delete_subject(req: DeleteRequest, manager: SubjectManagerDep) -> MessageResponse:
    manager.delete(req.id)
    return MessageResponse(message="Subject deleted successfully")
