from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParentCreate(BaseModel):
    user_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    relation: str = Field(min_length=1, description="Relation to the student, e.g. 'Ayah'.")
    student_id: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class ParentUpdateData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    student_id: Optional[str] = None
    name: Optional[str] = None
    relation: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class ParentUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    data: ParentUpdateData


class ParentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    student_id: Optional[str] = None
    name: str
    relation: str
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime
