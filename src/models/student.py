from sqlalchemy import Column, Date, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship
from .base import Base, utcnow


class StudentModel(Base):
    __tablename__ = "students"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    nisn = Column(String, unique=True, index=True, nullable=False)
    nik = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    birth_place = Column(String, nullable=False)
    birth_date = Column(Date, nullable=False)
    address = Column(String, nullable=False)
    gender = Column(String, nullable=False)
    parent_phone = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")

    class_id = Column(String, ForeignKey("classes.id"), nullable=False, index=True)
    academic_year_id = Column(String, ForeignKey("academic_years.id"), nullable=False)
    major_id = Column(String, ForeignKey("majors.id"), nullable=False)
    enrollment_date = Column(Date, nullable=False)
    graduation_date = Column(Date, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("UserModel", back_populates="student")
    class_ = relationship("ClassModel")
    violations = relationship(
        "ViolationModel", back_populates="student", cascade="all, delete-orphan"
    )
    # Parents outlive the student; their student_id is cleared instead
    parents = relationship("ParentModel", back_populates="student")
