"""Academic year routes."""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import AcademicYearManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.reference import AcademicYearCreate, AcademicYearUpdate, AcademicYearOut

router = APIRouter(prefix="/api/academic-years", tags=["Academic Years"])


@router.get("", response_model=List[AcademicYearOut], summary="List academic years")
def list_academic_years(manager: AcademicYearManagerDep) -> List[AcademicYearOut]:
    return manager.list()


@router.post(
    "", response_model=AcademicYearOut, status_code=status.HTTP_201_CREATED, summary="Create an academic year"
)
def create_academic_year(req: AcademicYearCreate, manager: AcademicYearManagerDep) -> AcademicYearOut:
    return manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=AcademicYearOut, summary="Update an academic year")
def update_academic_year(req: AcademicYearUpdate, manager: AcademicYearManagerDep) -> AcademicYearOut:
    return manager.update(req.id, req.model_dump(exclude_unset=True, exclude={"id"}))


@router.delete("", response_model=MessageResponse, summary="Delete an academic year")
def delete_academic_year(req: DeleteRequest, manager: AcademicYearManagerDep) -> MessageResponse:
    manager.delete(req.id)
    return MessageResponse(message="Academic year deleted successfully")
