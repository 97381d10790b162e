"""Schedule management routes."""

from typing import List, Optional

from fastapi import APIRouter, status

from core.dependencies import ScheduleManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.schedule import ScheduleCreate, ScheduleOut, ScheduleUpdate

router = APIRouter(prefix="/api/schedules", tags=["Schedules"])


@router.get("", response_model=List[ScheduleOut], summary="List schedules")
def list_schedules(
    schedule_manager: ScheduleManagerDep,
    class_id: Optional[str] = None,
    teacher_id: Optional[str] = None,
) -> List[ScheduleOut]:
    """List lesson slots ordered by weekday and start time.

    Args:
        schedule_manager: Injected ScheduleManager instance.
        class_id: Optional class filter.
        teacher_id: Optional teacher filter.
    """
    return schedule_manager.list(class_id=class_id, teacher_id=teacher_id)


@router.post(
    "",
    response_model=ScheduleOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a schedule",
)
def create_schedule(req: ScheduleCreate, schedule_manager: ScheduleManagerDep) -> ScheduleOut:
    """Create a lesson slot.

    Raises:
        ConflictError: 409 if the same class/subject/teacher slot exists.
    """
    return schedule_manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=ScheduleOut, summary="Update a schedule")
def update_schedule(req: ScheduleUpdate, schedule_manager: ScheduleManagerDep) -> ScheduleOut:
    return schedule_manager.update(req.id, req.model_dump(exclude_unset=True, exclude={"id"}))


@router.delete("", response_model=MessageResponse, summary="Delete a schedule")
def delete_schedule(req: DeleteRequest, schedule_manager: ScheduleManagerDep) -> MessageResponse:
    schedule_manager.delete(req.id)
    return MessageResponse(message="Schedule deleted successfully")
