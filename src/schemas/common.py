"""Shared request and response shapes."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DeleteRequest(BaseModel):
    """Body of every DELETE on a collection route."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1, description="ID of the record to delete.")


class MessageResponse(BaseModel):
    message: str


class EntityRef(BaseModel):
    """Bare reference to a related row, e.g. a user's student profile."""

    model_config = ConfigDict(from_attributes=True)

    id: str


class NamedRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: Optional[str] = None
