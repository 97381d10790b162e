from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class ClassModel(Base):
    __tablename__ = "classes"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)  # e.g. "X TKJ 1"
    grade = Column(Integer, nullable=False)
    capacity = Column(Integer, nullable=True)
    major_id = Column(String, ForeignKey("majors.id"), nullable=True)
    academic_year_id = Column(String, ForeignKey("academic_years.id"), nullable=True)

    major = relationship("MajorModel")
    academic_year = relationship("AcademicYearModel")
