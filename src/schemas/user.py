"""User schema definitions.

This module defines the User and Category data models together with the
form payloads and per-field error records used by the HTML views.
"""

from datetime import datetime
from typing import Dict, Optional

import pytz
from pydantic import BaseModel, Field


class User(BaseModel):
    user_id: Optional[int] = Field(
        default=None,
        description="Generated by the database on insert.",
    )
    fullname: str
    email: str
    username: str
    password_hash: str = Field(description="Bcrypt hash, never the plain password.")
    role_id: int
    profile_picture: Optional[str] = Field(
        default=None,
        description="Public path of the uploaded profile picture, e.g. /images/me.png",
    )
    created_at: str = Field(
        default_factory=lambda: datetime.now(pytz.utc).isoformat()
    )


class Category(BaseModel):
    category_id: int
    name: str


class RegistrationForm(BaseModel):
    """Raw registration fields exactly as submitted."""

    fullname: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None

    def prefill(self) -> Dict[str, str]:
        """Values that are safe to echo back into the form (no passwords)."""
        return {
            "fullname": self.fullname or "",
            "username": self.username or "",
            "email": self.email or "",
        }


class LoginForm(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class FormErrors(BaseModel):
    """One optional message per form field plus a generic slot.

    Field names follow the ``error_<field>`` attribute names expected by the
    templates, so ``confirm_password`` is reported as ``cpassword``.
    """

    fullname: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    cpassword: Optional[str] = None
    error: Optional[str] = None

    def has_errors(self) -> bool:
        return any(value is not None for value in self.model_dump().values())

    def to_attributes(self) -> Dict[str, str]:
        """Render as template attributes, e.g. ``{"error_username": "..."}``."""
        attributes = {}
        for name, message in self.model_dump().items():
            if message is None:
                continue
            key = name if name == "error" else f"error_{name}"
            attributes[key] = message
        return attributes

    @classmethod
    def generic(cls, message: str) -> "FormErrors":
        return cls(error=message)
