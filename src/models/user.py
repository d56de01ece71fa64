"""User database model.

This module defines the User database model using SQLAlchemy.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class UserModel(Base):
    """User database model."""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    fullname = Column(String, nullable=False)
    email = Column(String, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role_id = Column(Integer, ForeignKey("roles.role_id"), nullable=False)
    profile_picture = Column(String, nullable=True)  # public path, e.g. /images/me.png
    created_at = Column(String, nullable=False)  # ISO format string

    role = relationship("RoleModel", back_populates="users")
