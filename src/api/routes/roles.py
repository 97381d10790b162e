"""Role management routes."""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import RoleManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.role import RoleCreate, RoleOut, RoleUpdate

router = APIRouter(prefix="/api/role", tags=["Roles"])


@router.get("", response_model=List[RoleOut], summary="List roles")
def list_roles(role_manager: RoleManagerDep) -> List[RoleOut]:
    return role_manager.list()


@router.post(
    "", response_model=RoleOut, status_code=status.HTTP_201_CREATED, summary="Create a role"
)
def create_role(req: RoleCreate, role_manager: RoleManagerDep) -> RoleOut:
    """Create a role.

    Args:
        req: Name, description and permissions, all required.
        role_manager: Injected RoleManager instance.

    Returns:
        The created role.

    Raises:
        ConflictError: 409 if the name is taken; no row is written.
    """
    return role_manager.create(req.model_dump())


@router.put("", response_model=RoleOut, summary="Update a role")
def update_role(req: RoleUpdate, role_manager: RoleManagerDep) -> RoleOut:
    return role_manager.update(req.id, req.model_dump(exclude_unset=True, exclude={"id"}))


@router.delete("", response_model=MessageResponse, summary="Delete a role")
def delete_role(req: DeleteRequest, role_manager: RoleManagerDep) -> MessageResponse:
    """Delete a role that is not assigned to any user."""
    role_manager.delete(req.id)
    return MessageResponse(message="Role deleted successfully")
