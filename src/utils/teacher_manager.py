"""Teacher management utilities."""

from typing import Any, Dict, List

from sqlalchemy.orm import selectinload

from models.teacher import TeacherModel
from models.user import UserModel
from utils.crud_manager import CrudManager


class TeacherManager(CrudManager):
    """Manages teacher profiles."""

    model = TeacherModel
    label = "Teacher"
    references = {"user_id": (UserModel, "User")}

    def list(self) -> List[TeacherModel]:
        return (
            self._query()
            .options(selectinload(TeacherModel.user))
            .order_by(TeacherModel.name)
            .all()
        )

    def create(self, data: Dict[str, Any]) -> TeacherModel:
        values = dict(data)
        # Let the column default (today) apply instead of inserting NULL
        if values.get("start_date") is None:
            values.pop("start_date", None)
        return super().create(values)
