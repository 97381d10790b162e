from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship
from .base import Base, utcnow


class ParentModel(Base):
    __tablename__ = "parents"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    student_id = Column(String, ForeignKey("students.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String, nullable=False)
    relation = Column(String, nullable=False)  # e.g. 'Ayah', 'Ibu', 'Wali'
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("UserModel", back_populates="parent")
    student = relationship("StudentModel", back_populates="parents")
