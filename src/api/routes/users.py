"""User management routes.

This module handles HTTP endpoints for local users, their role assignments
and the identity-decorated user directory.
"""

from typing import List

from fastapi import APIRouter, status

from core.dependencies import IdentityProviderDep, UserManagerDep
from schemas.common import DeleteRequest, MessageResponse
from schemas.user import (
    AssignRoleRequest,
    UserCreate,
    UserDirectoryEntry,
    UserOut,
    UserUpdateRequest,
)
from utils.identity_reconciler import reconcile_users

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[UserOut], summary="List users")
def list_users(user_manager: UserManagerDep) -> List[UserOut]:
    """List all users with their profile references and roles.

    Args:
        user_manager: Injected UserManager instance.

    Returns:
        List of users.
    """
    return user_manager.list()


@router.get(
    "/directory",
    response_model=List[UserDirectoryEntry],
    summary="List users decorated with identity provider data",
)
def user_directory(
    user_manager: UserManagerDep,
    identity_provider: IdentityProviderDep,
) -> List[UserDirectoryEntry]:
    """Resolve every user's clerk_id against one identity listing.

    Users whose identity record is missing are returned with placeholder
    values rather than failing the request.
    """
    users = user_manager.list()
    records = identity_provider.list_identity_users()
    return reconcile_users(users, records)


@router.get("/{user_id}", response_model=UserOut, summary="Get a user")
def get_user(user_id: str, user_manager: UserManagerDep) -> UserOut:
    return user_manager.get(user_id)


@router.post(
    "", response_model=UserOut, status_code=status.HTTP_201_CREATED, summary="Create a user"
)
def create_user(req: UserCreate, user_manager: UserManagerDep) -> UserOut:
    """Create a user keyed by an identity provider id.

    Raises:
        ConflictError: 409 if the id is already taken.
    """
    return user_manager.create(req.model_dump(exclude_unset=True))


@router.put("", response_model=UserOut, summary="Update a user")
def update_user(req: UserUpdateRequest, user_manager: UserManagerDep) -> UserOut:
    return user_manager.update(req.id, req.data.model_dump(exclude_unset=True))


@router.delete("", response_model=MessageResponse, summary="Delete a user")
def delete_user(req: DeleteRequest, user_manager: UserManagerDep) -> MessageResponse:
    """Delete a user together with its student, teacher and parent profiles."""
    user_manager.delete(req.id)
    return MessageResponse(message="User deleted successfully")


@router.post(
    "/{user_id}/roles",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Assign a role to a user",
)
def assign_role(
    user_id: str, req: AssignRoleRequest, user_manager: UserManagerDep
) -> UserOut:
    return user_manager.assign_role(user_id, req.role_id)


@router.delete(
    "/{user_id}/roles/{role_id}",
    response_model=MessageResponse,
    summary="Remove a role from a user",
)
def revoke_role(user_id: str, role_id: str, user_manager: UserManagerDep) -> MessageResponse:
    user_manager.revoke_role(user_id, role_id)
    return MessageResponse(message="Role removed successfully")
