"""Role management utilities."""

import logging
from typing import Any, Dict, List

from core.exceptions import ConflictError
from models.user import RoleModel, UserRoleModel
from utils.crud_manager import CrudManager

logger = logging.getLogger(__name__)


class RoleManager(CrudManager):
    """Manages named permission bundles."""

    model = RoleModel
    label = "Role"

    def list(self) -> List[RoleModel]:
        return self._query().order_by(RoleModel.name).all()

    def create(self, data: Dict[str, Any]) -> RoleModel:
        """Create a role.

        Raises:
            ConflictError: If a role with the same name exists.
        """
        self._ensure_name_free(data["name"])
        return super().create(data)

    def update(self, record_id: str, changes: Dict[str, Any]) -> RoleModel:
        name = changes.get("name")
        if name is not None:
            self._ensure_name_free(name, exclude_id=record_id)
        return super().update(record_id, changes)

    def delete(self, record_id: str) -> None:
        """Delete a role that no user holds.

        Raises:
            NotFoundError: If the role does not exist.
            ConflictError: If the role is still assigned to users.
        """
        role = self.get(record_id)
        assigned = (
            self.db.query(UserRoleModel)
            .filter(UserRoleModel.role_id == role.id)
            .count()
        )
        if assigned:
            raise ConflictError(
                f"Role '{role.name}' is still assigned to {assigned} user(s)"
            )
        super().delete(record_id)

    def _ensure_name_free(self, name: str, exclude_id: str = None) -> None:
        query = self.db.query(RoleModel).filter(RoleModel.name == name)
        if exclude_id:
            query = query.filter(RoleModel.id != exclude_id)
        if query.first():
            raise ConflictError(f"Role '{name}' already exists")
