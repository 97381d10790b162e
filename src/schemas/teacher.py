"""Teacher schema definitions."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.student import StudentUserRef


class TeacherCreate(BaseModel):
    user_id: str = Field(min_length=1)
    employee_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    nik: str = Field(min_length=1)
    birth_place: str = Field(min_length=1)
    birth_date: date
    address: str = Field(min_length=1)

    avatar_url: Optional[str] = None
    gender: str = "L"
    position: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: str = "active"


class TeacherUpdateData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    employee_id: Optional[str] = None
    name: Optional[str] = None
    nik: Optional[str] = None
    avatar_url: Optional[str] = None
    birth_place: Optional[str] = None
    birth_date: Optional[date] = None
    address: Optional[str] = None
    gender: Optional[str] = None
    position: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = None


class TeacherUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    data: TeacherUpdateData


class TeacherOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    employee_id: str
    name: str
    nik: str
    avatar_url: Optional[str] = None
    birth_place: str
    birth_date: date
    address: str
    gender: str
    position: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    status: str
    created_at: datetime
    updated_at: datetime
    user: Optional[StudentUserRef] = None
