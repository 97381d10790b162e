"""User and role database models.

This module defines the User, Role and UserRole database models using
SQLAlchemy. A user is the identity anchor: student, teacher and parent
profiles hang off it one-to-one.
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, JSON, String, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base, utcnow


class UserModel(Base):
    """User database model."""

    __tablename__ = "users"

    # Usually the identity provider's user id, but any unique string is accepted
    id = Column(String, primary_key=True, index=True)
    # Weak reference to an identity provider record, resolved at read time
    clerk_id = Column(String, nullable=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    username = Column(String, unique=True, nullable=True)
    phone = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    student = relationship(
        "StudentModel", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    teacher = relationship(
        "TeacherModel", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    parent = relationship(
        "ParentModel", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    role_links = relationship(
        "UserRoleModel", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def roles(self):
        return [link.role for link in self.role_links]


class RoleModel(Base):
    """Role database model."""

    __tablename__ = "roles"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)
    description = Column(String, nullable=False)
    permissions = Column(JSON, nullable=False, default=list)

    user_links = relationship("UserRoleModel", back_populates="role")


class UserRoleModel(Base):
    """Join row granting one user one role."""

    __tablename__ = "user_roles"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role_id = Column(String, ForeignKey("roles.id"), nullable=False, index=True)
    assigned_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    user = relationship("UserModel", back_populates="role_links")
    role = relationship("RoleModel", back_populates="user_links")

    __table_args__ = (
        UniqueConstraint("user_id", "role_id", name="uq_user_roles_user_role"),
    )
