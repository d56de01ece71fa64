"""Role database model.

This module defines the Role reference model using SQLAlchemy.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class RoleModel(Base):
    """Role database model."""

    __tablename__ = "roles"

    role_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, index=True, nullable=False)  # 'admin' or 'user'

    users = relationship("UserModel", back_populates="role")
