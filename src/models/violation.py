"""Violation database models.

This module defines the ViolationType and Violation database models using
SQLAlchemy.
"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from .base import Base, utcnow


class ViolationTypeModel(Base):
    """Categorised, point-valued infraction."""

    __tablename__ = "violation_types"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)
    category = Column(String, nullable=False)  # e.g. 'ringan', 'sedang', 'berat'
    points = Column(Integer, nullable=False, default=0)
    description = Column(String, nullable=True)


class ViolationModel(Base):
    """Disciplinary record for one student."""

    __tablename__ = "violations"

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    violation_type_id = Column(String, ForeignKey("violation_types.id"), nullable=False)
    class_id = Column(String, ForeignKey("classes.id"), nullable=False)
    description = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")
    reported_by = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    resolution_date = Column(Date, nullable=True)
    resolution_notes = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    student = relationship("StudentModel", back_populates="violations")
    violation_type = relationship("ViolationTypeModel")
    class_ = relationship("ClassModel")
