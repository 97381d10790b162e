"""Schedule database model.

One row is one weekly lesson slot of a subject taught to a class.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class ScheduleModel(Base):
    """Schedule database model."""

    __tablename__ = "schedules"

    id = Column(String, primary_key=True, index=True)
    class_id = Column(String, ForeignKey("classes.id"), nullable=False, index=True)
    subject_id = Column(String, ForeignKey("subjects.id"), nullable=False)
    teacher_id = Column(String, ForeignKey("teachers.id", ondelete="CASCADE"), nullable=False, index=True)
    academic_year_id = Column(String, ForeignKey("academic_years.id"), nullable=False)
    day_of_week = Column(Integer, nullable=False)  # 1 = Monday ... 7 = Sunday
    start_time = Column(String, nullable=False)  # "HH:MM"
    end_time = Column(String, nullable=False)  # "HH:MM"
    room = Column(String, nullable=True)

    class_ = relationship("ClassModel")
    subject = relationship("SubjectModel")
    teacher = relationship("TeacherModel", back_populates="schedules")
    academic_year = relationship("AcademicYearModel")

    __table_args__ = (
        UniqueConstraint(
            "class_id", "subject_id", "teacher_id", "day_of_week", "start_time",
            name="uq_schedules_slot",
        ),
    )
