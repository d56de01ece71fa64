"""Role reference data."""

import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from config import DEFAULT_ROLES
from core.exceptions import RoleNotFoundError
from models.role import RoleModel

logger = logging.getLogger(__name__)


class RoleManager:
    """Looks up and seeds roles."""

    def __init__(self, db: Session):
        self.db = db

    def get_role(self, name: str) -> RoleModel:
        """Get a role by name.

        Args:
            name: Role name, e.g. "user".

        Returns:
            The RoleModel.

        Raises:
            RoleNotFoundError: If no role has this name.
        """
        model = self.db.query(RoleModel).filter(RoleModel.name == name).first()
        if not model:
            raise RoleNotFoundError(name)
        return model

    def list_roles(self) -> List[RoleModel]:
        return self.db.query(RoleModel).order_by(RoleModel.role_id).all()

    def ensure_default_roles(self, names: Iterable[str] = DEFAULT_ROLES) -> None:
        existing = {name for (name,) in self.db.query(RoleModel.name).all()}
        missing = [name for name in names if name not in existing]
        if not missing:
            return
        self.db.add_all([RoleModel(name=name) for name in missing])
        self.db.commit()
        logger.info("Seeded roles: %s", ", ".join(missing))
