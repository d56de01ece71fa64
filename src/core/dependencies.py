"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from utils import category_manager
from utils import image_store
from utils import registration
from utils import role_manager
from utils import user_manager


def get_user_manager(db: Session = Depends(get_db)) -> user_manager.UserManager:
    """Get UserManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        UserManager instance.
    """
    return user_manager.UserManager(db)


def get_role_manager(db: Session = Depends(get_db)) -> role_manager.RoleManager:
    """Get RoleManager instance with request-scoped DB session."""
    return role_manager.RoleManager(db)


def get_category_manager(
    db: Session = Depends(get_db),
) -> category_manager.CategoryManager:
    """Get CategoryManager instance with request-scoped DB session."""
    return category_manager.CategoryManager(db)


def get_image_store() -> image_store.ImageStore:
    """Get an ImageStore writing to the configured upload directory."""
    return image_store.ImageStore()


UserManagerDep = Annotated[
    user_manager.UserManager, Depends(get_user_manager)
]
RoleManagerDep = Annotated[
    role_manager.RoleManager, Depends(get_role_manager)
]
CategoryManagerDep = Annotated[
    category_manager.CategoryManager, Depends(get_category_manager)
]
ImageStoreDep = Annotated[
    image_store.ImageStore, Depends(get_image_store)
]


def get_registration_service(
    users: UserManagerDep,
    roles: RoleManagerDep,
    images: ImageStoreDep,
) -> registration.RegistrationService:
    """Get RegistrationService wired to the request-scoped managers.

    Args:
        users: Injected UserManager.
        roles: Injected RoleManager.
        images: Injected ImageStore.

    Returns:
        RegistrationService instance.
    """
    return registration.RegistrationService(users, roles, images)


RegistrationServiceDep = Annotated[
    registration.RegistrationService, Depends(get_registration_service)
]
