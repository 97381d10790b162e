"""User management utilities.

This module provides persistence for local users and their role
assignments. Users are keyed by the ID the caller supplies, which is
normally the identity provider's user id.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import selectinload

from core.exceptions import ConflictError, NotFoundError
from models.user import RoleModel, UserModel, UserRoleModel
from utils.crud_manager import CrudManager, new_id

logger = logging.getLogger(__name__)


class UserManager(CrudManager):
    """Manages users and the roles granted to them."""

    model = UserModel
    label = "User"

    def _query(self):
        return self.db.query(UserModel).options(
            selectinload(UserModel.student),
            selectinload(UserModel.teacher),
            selectinload(UserModel.parent),
            selectinload(UserModel.role_links).selectinload(UserRoleModel.role),
        )

    def list(self) -> List[UserModel]:
        return self._query().order_by(UserModel.created_at).all()

    def create(self, data: Dict[str, Any]) -> UserModel:
        """Create a user keyed by the supplied ID.

        Args:
            data: User fields; ``id`` is required. When ``clerk_id`` is not
                present it is taken to be the same as ``id``.

        Returns:
            Created UserModel instance.

        Raises:
            ConflictError: If a user with this ID already exists.
        """
        user_id = data["id"]
        if self.db.get(UserModel, user_id) is not None:
            raise ConflictError(f"User '{user_id}' already exists")
        values = dict(data)
        if "clerk_id" not in values:
            values["clerk_id"] = user_id
        return super().create(values)

    def assign_role(self, user_id: str, role_id: str) -> UserModel:
        """Grant a role to a user.

        Raises:
            NotFoundError: If the user or the role does not exist.
            ConflictError: If the user already holds the role.
        """
        user = self.get(user_id)
        if self.db.get(RoleModel, role_id) is None:
            raise NotFoundError("Role", role_id)
        existing = (
            self.db.query(UserRoleModel)
            .filter(UserRoleModel.user_id == user_id, UserRoleModel.role_id == role_id)
            .first()
        )
        if existing:
            raise ConflictError(f"User '{user_id}' already has role '{role_id}'")

        self.db.add(UserRoleModel(id=new_id(), user_id=user_id, role_id=role_id))
        self._commit()
        self.db.refresh(user)
        logger.info("Assigned role %s to user %s", role_id, user_id)
        return user

    def revoke_role(self, user_id: str, role_id: str) -> None:
        link = (
            self.db.query(UserRoleModel)
            .filter(UserRoleModel.user_id == user_id, UserRoleModel.role_id == role_id)
            .first()
        )
        if not link:
            raise NotFoundError("Role assignment", f"{user_id}/{role_id}")
        self.db.delete(link)
        self._commit()
        logger.info("Revoked role %s from user %s", role_id, user_id)
