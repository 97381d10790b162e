from sqlalchemy import Column, String
from .base import Base


class MajorModel(Base):
    __tablename__ = "majors"

    id = Column(String, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)  # e.g. "TKJ"
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
