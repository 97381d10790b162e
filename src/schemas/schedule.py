"""Schedule schema definitions."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from schemas.common import NamedRef

# 24h "HH:MM"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ScheduleCreate(BaseModel):
    class_id: str = Field(min_length=1)
    subject_id: str = Field(min_length=1)
    teacher_id: str = Field(min_length=1)
    academic_year_id: str = Field(min_length=1)
    day_of_week: int = Field(ge=1, le=7, description="1 = Monday ... 7 = Sunday.")
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)
    room: Optional[str] = None

    @model_validator(mode="after")
    def check_time_range(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class ScheduleUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    class_id: Optional[str] = None
    subject_id: Optional[str] = None
    teacher_id: Optional[str] = None
    academic_year_id: Optional[str] = None
    day_of_week: Optional[int] = Field(default=None, ge=1, le=7)
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    room: Optional[str] = None


class ScheduleTeacherRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class ScheduleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    class_id: str
    subject_id: str
    teacher_id: str
    academic_year_id: str
    day_of_week: int
    start_time: str
    end_time: str
    room: Optional[str] = None
    class_: Optional[NamedRef] = Field(default=None, serialization_alias="class")
    subject: Optional[NamedRef] = None
    teacher: Optional[ScheduleTeacherRef] = None
