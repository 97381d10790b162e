"""Violation management utilities."""

from typing import List, Optional

from sqlalchemy.orm import selectinload

from models.class_model import ClassModel
from models.student import StudentModel
from models.violation import ViolationModel, ViolationTypeModel
from utils.crud_manager import CrudManager


class ViolationTypeManager(CrudManager):
    model = ViolationTypeModel
    label = "Violation type"

    def list(self) -> List[ViolationTypeModel]:
        return self._query().order_by(ViolationTypeModel.category, ViolationTypeModel.name).all()


class ViolationManager(CrudManager):
    """Manages disciplinary records."""

    model = ViolationModel
    label = "Violation"
    references = {
        "student_id": (StudentModel, "Student"),
        "violation_type_id": (ViolationTypeModel, "Violation type"),
        "class_id": (ClassModel, "Class"),
    }

    def list(self, student_id: Optional[str] = None) -> List[ViolationModel]:
        """List violations, newest first.

        Args:
            student_id: Optional filter to one student's record.
        """
        query = self._query().options(
            selectinload(ViolationModel.student),
            selectinload(ViolationModel.violation_type),
            selectinload(ViolationModel.class_),
        )
        if student_id:
            query = query.filter(ViolationModel.student_id == student_id)
        return query.order_by(ViolationModel.date.desc(), ViolationModel.created_at.desc()).all()

    def total_points(self, student_id: str) -> int:
        """Sum of the points of a student's violations that still count."""
        violations = (
            self.db.query(ViolationModel)
            .options(selectinload(ViolationModel.violation_type))
            .filter(
                ViolationModel.student_id == student_id,
                ViolationModel.status != "dismissed",
            )
            .all()
        )
        return sum(v.violation_type.points for v in violations)
