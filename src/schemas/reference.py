"""Reference data schemas: majors, academic years, classes and subjects.

Updates are flat bodies carrying the record id next to the fields to change.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Majors ---

class MajorCreate(BaseModel):
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: Optional[str] = None


class MajorUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class MajorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    name: str
    description: Optional[str] = None


# --- Academic years ---

class AcademicYearCreate(BaseModel):
    year: str = Field(pattern=r"^\d{4}/\d{4}$", description="e.g. '2025/2026'")
    start_date: date
    end_date: date
    is_active: bool = False

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class AcademicYearUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    year: Optional[str] = Field(default=None, pattern=r"^\d{4}/\d{4}$")
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: Optional[bool] = None


class AcademicYearOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    year: str
    start_date: date
    end_date: date
    is_active: bool


# --- Classes ---

class ClassCreate(BaseModel):
    name: str = Field(min_length=1)
    grade: int = Field(ge=1, le=12)
    capacity: Optional[int] = Field(default=None, ge=1)
    major_id: Optional[str] = None
    academic_year_id: Optional[str] = None


class ClassUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    name: Optional[str] = None
    grade: Optional[int] = Field(default=None, ge=1, le=12)
    capacity: Optional[int] = Field(default=None, ge=1)
    major_id: Optional[str] = None
    academic_year_id: Optional[str] = None


class ClassOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    grade: int
    capacity: Optional[int] = None
    major_id: Optional[str] = None
    academic_year_id: Optional[str] = None


# --- Subjects ---

class SubjectCreate(BaseModel):
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    credits: int = Field(default=0, ge=0)
    major_id: Optional[str] = None


class SubjectUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    code: Optional[str] = None
    name: Optional[str] = None
    credits: Optional[int] = Field(default=None, ge=0)
    major_id: Optional[str] = None


class SubjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    name: str
    credits: int
    major_id: Optional[str] = None
