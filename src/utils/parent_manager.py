"""Parent management utilities."""

from typing import List

from models.parent import ParentModel
from models.student import StudentModel
from models.user import UserModel
from utils.crud_manager import CrudManager


class ParentManager(CrudManager):
    model = ParentModel
    label = "Parent"
    references = {
        "user_id": (UserModel, "User"),
        "student_id": (StudentModel, "Student"),
    }

    def list(self) -> List[ParentModel]:
        return self._query().order_by(ParentModel.name).all()
