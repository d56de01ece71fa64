"""Category database model.

A category classifies blog posts (e.g. Technology, Health, Travel).
"""

from sqlalchemy import Column, Integer, String

from .base import Base


class CategoryModel(Base):
    """Category database model."""

    __tablename__ = "categories"

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False)
