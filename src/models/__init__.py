"""Database models package.

Importing this package registers every model with ``Base.metadata``.
"""

from .base import Base
from .role import RoleModel
from .category import CategoryModel
from .user import UserModel

__all__ = ["Base", "RoleModel", "CategoryModel", "UserModel"]
