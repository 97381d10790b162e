"""Role schema definitions."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RoleCreate(BaseModel):
    name: str = Field(min_length=1, description="Unique role name, e.g. 'librarian'.")
    description: str = Field(min_length=1)
    permissions: List[str] = Field(description="Permission strings granted by the role.")


class RoleUpdate(BaseModel):
    """Flat update body: the role id plus the fields to change."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    permissions: Optional[List[str]] = None


class RoleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    permissions: List[str]
