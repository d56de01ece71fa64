"""User management utilities.

This module provides user storage and lookup, including the create operation
used by registration and the credential check used by login.
"""

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.user import UserModel
from schemas.user import User
from utils.converters import model_to_user, user_to_model
from utils.password import verify_password

logger = logging.getLogger(__name__)


class CreateOutcome(str, enum.Enum):
    """Outcome of a create call."""

    CREATED = "created"
    REJECTED = "rejected"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class CreateResult:
    """Tagged result of ``UserManager.create_user``.

    Attributes:
        outcome: Which of the three cases occurred.
        user: The stored user, set only when ``outcome`` is CREATED.
        conflict: True when the store rejected the row because the username
            is already taken.
    """

    outcome: CreateOutcome
    user: Optional[User] = None
    conflict: bool = False

    @classmethod
    def created(cls, user: User) -> "CreateResult":
        return cls(CreateOutcome.CREATED, user=user)

    @classmethod
    def rejected(cls, conflict: bool = False) -> "CreateResult":
        return cls(CreateOutcome.REJECTED, conflict=conflict)

    @classmethod
    def unavailable(cls) -> "CreateResult":
        return cls(CreateOutcome.UNAVAILABLE)


def _is_username_violation(error: IntegrityError) -> bool:
    message = str(error.orig if error.orig is not None else error).lower()
    return "username" in message or "unique" in message


class UserManager:
    """Manages user data persistence and operations using SQLAlchemy."""

    def __init__(self, db: Session):
        """Initialize UserManager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    def create_user(self, user: User) -> CreateResult:
        """Insert a new user row.

        The unique constraint on ``users.username`` is the authoritative
        guard against duplicates: two requests may both pass a read-based
        check, but only one insert can succeed.

        Args:
            user: User to store. ``user_id`` is ignored and generated.

        Returns:
            CreateResult: CREATED with the stored user, REJECTED when the
            store refused the row, UNAVAILABLE when the database could not be
            reached.
        """
        model = user_to_model(user.model_copy(update={"user_id": None}))
        try:
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except IntegrityError as e:
            self.db.rollback()
            conflict = _is_username_violation(e)
            logger.warning(
                "Rejected user '%s' (username conflict: %s)", user.username, conflict
            )
            return CreateResult.rejected(conflict=conflict)
        except OperationalError:
            self.db.rollback()
            logger.exception("Database unavailable while creating user '%s'", user.username)
            return CreateResult.unavailable()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create user '%s'", user.username)
            return CreateResult.rejected()

        logger.info("Created user: %s", user.username)
        return CreateResult.created(model_to_user(model))

    def get_user_by_username(self, username: Optional[str]) -> Optional[User]:
        """Get a user by username.

        Args:
            username: Username to look up.

        Returns:
            User object if found, None otherwise.
        """
        if not username:
            return None
        model = self.db.query(UserModel).filter(UserModel.username == username).first()
        if model:
            return model_to_user(model)
        return None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        model = self.db.query(UserModel).filter(UserModel.user_id == user_id).first()
        if model:
            return model_to_user(model)
        return None

    def list_users(self) -> List[User]:
        models = self.db.query(UserModel).order_by(UserModel.user_id).all()
        return [model_to_user(m) for m in models]

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """Check a username/password pair.

        Args:
            username: Username to look up.
            password: Plain text password.

        Returns:
            The matching User, or None if the user does not exist or the
            password is wrong.
        """
        user = self.get_user_by_username(username)
        if user is None:
            return None
        if not verify_password(username, password, user.password_hash):
            return None
        return user
