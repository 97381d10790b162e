"""Student schema definitions."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import NamedRef


class StudentCreate(BaseModel):
    # Required fields, checked in this order
    user_id: str = Field(min_length=1)
    nisn: str = Field(min_length=1, description="National student number.")
    birth_place: str = Field(min_length=1)
    birth_date: date
    nik: str = Field(min_length=1, description="National identity number.")
    address: str = Field(min_length=1)
    class_id: str = Field(min_length=1)
    academic_year_id: str = Field(min_length=1)
    enrollment_date: date
    gender: str = Field(min_length=1)
    graduation_date: date
    major_id: str = Field(min_length=1)
    parent_phone: str = Field(min_length=1)

    name: Optional[str] = None
    avatar_url: Optional[str] = None
    status: str = "active"


class StudentUpdateData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nisn: Optional[str] = None
    nik: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    birth_place: Optional[str] = None
    birth_date: Optional[date] = None
    address: Optional[str] = None
    class_id: Optional[str] = None
    academic_year_id: Optional[str] = None
    major_id: Optional[str] = None
    enrollment_date: Optional[date] = None
    graduation_date: Optional[date] = None
    gender: Optional[str] = None
    parent_phone: Optional[str] = None
    status: Optional[str] = None


class StudentUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    data: StudentUpdateData


class StudentUserRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    clerk_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class StudentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    nisn: str
    nik: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    birth_place: str
    birth_date: date
    address: str
    class_id: str
    academic_year_id: str
    major_id: str
    enrollment_date: date
    graduation_date: Optional[date] = None
    gender: str
    parent_phone: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime
    user: Optional[StudentUserRef] = None
    class_: Optional[NamedRef] = Field(default=None, serialization_alias="class")
