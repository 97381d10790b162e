"""Student management utilities."""

from typing import List, Optional

from sqlalchemy.orm import selectinload

from models.academic_year import AcademicYearModel
from models.class_model import ClassModel
from models.major import MajorModel
from models.student import StudentModel
from models.user import UserModel
from utils.crud_manager import CrudManager


class StudentManager(CrudManager):
    """Manages student profiles. A student is created after its user row."""

    model = StudentModel
    label = "Student"
    references = {
        "user_id": (UserModel, "User"),
        "class_id": (ClassModel, "Class"),
        "academic_year_id": (AcademicYearModel, "Academic year"),
        "major_id": (MajorModel, "Major"),
    }

    def list(self, class_id: Optional[str] = None) -> List[StudentModel]:
        """List students, optionally only those of one class.

        Args:
            class_id: Optional class filter.

        Returns:
            Students with their user and class loaded.
        """
        query = self._query().options(
            selectinload(StudentModel.user),
            selectinload(StudentModel.class_),
        )
        if class_id:
            query = query.filter(StudentModel.class_id == class_id)
        return query.order_by(StudentModel.created_at).all()
