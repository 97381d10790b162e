"""Violation schema definitions."""

from datetime import date as Date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import NamedRef

ViolationStatus = Literal["active", "resolved", "pending", "dismissed"]


class ViolationTypeCreate(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    points: int = Field(ge=0)
    description: Optional[str] = None


class ViolationTypeUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    name: Optional[str] = None
    category: Optional[str] = None
    points: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None


class ViolationTypeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: str
    points: int
    description: Optional[str] = None


class ViolationCreate(BaseModel):
    student_id: str = Field(min_length=1)
    violation_type_id: str = Field(min_length=1)
    class_id: str = Field(min_length=1)
    status: ViolationStatus = "active"
    reported_by: str = Field(min_length=1)
    date: Date
    description: Optional[str] = None
    resolution_date: Optional[Date] = None
    resolution_notes: Optional[str] = None


class ViolationUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    student_id: Optional[str] = None
    violation_type_id: Optional[str] = None
    class_id: Optional[str] = None
    status: Optional[ViolationStatus] = None
    reported_by: Optional[str] = None
    date: Optional[Date] = None
    description: Optional[str] = None
    resolution_date: Optional[Date] = None
    resolution_notes: Optional[str] = None


class ViolationTypeRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    points: int
    category: str


class ViolationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    student_id: str
    violation_type_id: str
    class_id: str
    status: str
    reported_by: str
    date: Date
    description: Optional[str] = None
    resolution_date: Optional[Date] = None
    resolution_notes: Optional[str] = None
    created_at: datetime
    student: Optional[NamedRef] = None
    violation_type: Optional[ViolationTypeRef] = None
    class_: Optional[NamedRef] = Field(default=None, serialization_alias="class")
