"""Schedule management utilities."""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import selectinload

from core.exceptions import ValidationError
from models.academic_year import AcademicYearModel
from models.class_model import ClassModel
from models.schedule import ScheduleModel
from models.subject import SubjectModel
from models.teacher import TeacherModel
from utils.crud_manager import CrudManager


class ScheduleManager(CrudManager):
    """Manages weekly lesson slots."""

    model = ScheduleModel
    label = "Schedule"
    references = {
        "class_id": (ClassModel, "Class"),
        "subject_id": (SubjectModel, "Subject"),
        "teacher_id": (TeacherModel, "Teacher"),
        "academic_year_id": (AcademicYearModel, "Academic year"),
    }

    def list(
        self, class_id: Optional[str] = None, teacher_id: Optional[str] = None
    ) -> List[ScheduleModel]:
        """List schedules ordered by weekday and start time.

        Args:
            class_id: Optional class filter.
            teacher_id: Optional teacher filter.
        """
        query = self._query().options(
            selectinload(ScheduleModel.class_),
            selectinload(ScheduleModel.subject),
            selectinload(ScheduleModel.teacher),
        )
        if class_id:
            query = query.filter(ScheduleModel.class_id == class_id)
        if teacher_id:
            query = query.filter(ScheduleModel.teacher_id == teacher_id)
        return query.order_by(ScheduleModel.day_of_week, ScheduleModel.start_time).all()

    def update(self, record_id: str, changes: Dict[str, Any]) -> ScheduleModel:
        schedule = self.get(record_id)
        start = changes.get("start_time") or schedule.start_time
        end = changes.get("end_time") or schedule.end_time
        if end <= start:
            raise ValidationError("end_time must be after start_time")
        return super().update(record_id, changes)
