from sqlalchemy import Column, ForeignKey, Integer, String
from .base import Base


class SubjectModel(Base):
    __tablename__ = "subjects"

    id = Column(String, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    credits = Column(Integer, nullable=False, default=0)
    # Null for subjects shared by every major
    major_id = Column(String, ForeignKey("majors.id"), nullable=True)
