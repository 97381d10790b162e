"""Reference data management: majors, academic years, classes and subjects.

These rows are looked up by students, schedules and violations. Deleting
one that is still referenced fails with ConflictError.
"""

import logging
from typing import Any, Dict, List

from core.exceptions import ValidationError
from models.academic_year import AcademicYearModel
from models.class_model import ClassModel
from models.major import MajorModel
from models.subject import SubjectModel
from utils.crud_manager import CrudManager

logger = logging.getLogger(__name__)


class MajorManager(CrudManager):
    model = MajorModel
    label = "Major"

    def list(self) -> List[MajorModel]:
        return self._query().order_by(MajorModel.code).all()


class AcademicYearManager(CrudManager):
    """Manages academic years. At most one year is active at a time."""

    model = AcademicYearModel
    label = "Academic year"

    def list(self) -> List[AcademicYearModel]:
        return self._query().order_by(AcademicYearModel.start_date.desc()).all()

    def create(self, data: Dict[str, Any]) -> AcademicYearModel:
        if data.get("is_active"):
            self._deactivate_others()
        return super().create(data)

    def update(self, record_id: str, changes: Dict[str, Any]) -> AcademicYearModel:
        year = self.get(record_id)
        start = changes.get("start_date") or year.start_date
        end = changes.get("end_date") or year.end_date
        if end <= start:
            raise ValidationError("end_date must be after start_date")
        if changes.get("is_active"):
            self._deactivate_others(exclude_id=record_id)
        return super().update(record_id, changes)

    def _deactivate_others(self, exclude_id: str = None) -> None:
        query = self.db.query(AcademicYearModel).filter(AcademicYearModel.is_active.is_(True))
        if exclude_id:
            query = query.filter(AcademicYearModel.id != exclude_id)
        for other in query.all():
            other.is_active = False
            logger.info("Deactivated academic year: %s", other.year)


class ClassManager(CrudManager):
    model = ClassModel
    label = "Class"
    references = {
        "major_id": (MajorModel, "Major"),
        "academic_year_id": (AcademicYearModel, "Academic year"),
    }

    def list(self) -> List[ClassModel]:
        return self._query().order_by(ClassModel.grade, ClassModel.name).all()


class SubjectManager(CrudManager):
    model = SubjectModel
    label = "Subject"
    references = {"major_id": (MajorModel, "Major")}

    def list(self) -> List[SubjectModel]:
        return self._query().order_by(SubjectModel.code).all()
