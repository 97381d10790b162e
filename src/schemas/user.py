"""User schema definitions.

This module defines request and response models for local users and their
role assignments.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import EntityRef, NamedRef


class UserCreate(BaseModel):
    id: str = Field(
        min_length=1,
        description="User ID, normally the identity provider's user id.",
    )
    clerk_id: Optional[str] = Field(
        default=None,
        description="Identity provider record id. Defaults to `id` when omitted.",
    )
    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: bool = True


class UserUpdateData(BaseModel):
    """Fields of a user that may be changed after creation."""

    model_config = ConfigDict(extra="forbid")

    clerk_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: Optional[bool] = None


class UserUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    data: UserUpdateData


class AssignRoleRequest(BaseModel):
    role_id: str = Field(min_length=1)


class UserOut(BaseModel):
    """User with its profile references and role names."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    clerk_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: bool
    student: Optional[EntityRef] = None
    teacher: Optional[EntityRef] = None
    parent: Optional[EntityRef] = None
    roles: List[NamedRef] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class UserDirectoryEntry(BaseModel):
    """A user row decorated with data from the identity provider."""

    user_id: str
    clerk_id: Optional[str] = None
    name: str
    email: str
    avatar_url: Optional[str] = None
    linked: bool = Field(description="True when clerk_id resolved to a live identity record.")
    identity_label: str
    roles: List[str] = Field(default_factory=list)
