from sqlalchemy import Boolean, Column, Date, String
from .base import Base


class AcademicYearModel(Base):
    __tablename__ = "academic_years"

    id = Column(String, primary_key=True, index=True)
    year = Column(String, unique=True, index=True, nullable=False)  # e.g. "2025/2026"
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    is_active = Column(Boolean, nullable=False, default=False)
