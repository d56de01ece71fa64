"""Account registration workflow.

``RegistrationService`` validates the submitted form, builds the user record
(role lookup, password hash, optional profile picture) and stores it. It never
touches the HTTP response: callers get back either a ``RedirectResult`` or a
``RenderResult`` and turn that into a response themselves.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from fastapi import UploadFile

from config import DEFAULT_USER_ROLE, LOGIN_PATH
from schemas.user import FormErrors, RegistrationForm, User
from utils import validation
from utils.image_store import ImageStore
from utils.password import hash_password
from utils.role_manager import RoleManager
from utils.user_manager import CreateOutcome, UserManager

logger = logging.getLogger(__name__)

FULLNAME_REQUIRED = "Fullname is required."
USERNAME_REQUIRED = "Username is required."
EMAIL_REQUIRED = "Email is required."
PASSWORD_REQUIRED = "Password is required."
CPASSWORD_REQUIRED = "Please retype the password."
USERNAME_INVALID = "Username must start with a letter and contain only letters and numbers."
EMAIL_INVALID = "Invalid email format."
PASSWORD_WEAK = (
    "Password must be at least 8 characters long, with 1 uppercase letter, "
    "1 number, and 1 symbol."
)
PASSWORDS_MISMATCH = "Passwords do not match."
USERNAME_TAKEN = "The user with this username already exists."
INVALID_INPUT = "Invalid input."

REGISTER_SUCCESS = "Account Successfully Created, Please Login."
REGISTER_REJECTED = "Could not register your account. Please try again later!"
SERVER_MAINTENANCE = "Our server is under maintenance. Please try again later!"
UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later!"


@dataclass(frozen=True)
class RedirectResult:
    """Send the client elsewhere, optionally with a one-time notice."""

    location: str
    notice: Optional[str] = None


@dataclass(frozen=True)
class RenderResult:
    """Re-render the registration form with errors and prefilled values."""

    errors: FormErrors
    values: Dict[str, str] = field(default_factory=dict)

    def context(self) -> Dict[str, str]:
        """Template attributes: error messages plus fullname/username/email."""
        return {**self.values, **self.errors.to_attributes()}


RegistrationResult = Union[RedirectResult, RenderResult]


class RegistrationService:
    """Registers new accounts."""

    def __init__(
        self,
        user_manager: UserManager,
        role_manager: RoleManager,
        image_store: ImageStore,
    ):
        self.user_manager = user_manager
        self.role_manager = role_manager
        self.image_store = image_store

    def validate(self, form: RegistrationForm) -> FormErrors:
        """Collect every field error for a registration attempt.

        Each field is checked for presence first; a field that is missing is
        not checked any further. The username uniqueness lookup runs last and
        overwrites any earlier username error.

        Args:
            form: Submitted registration fields.

        Returns:
            FormErrors; ``has_errors()`` is False when the form is valid. Any
            unexpected failure yields only the generic "Invalid input." error.
        """
        try:
            errors = FormErrors()
            if validation.is_null_or_empty(form.fullname):
                errors.fullname = FULLNAME_REQUIRED
            if validation.is_null_or_empty(form.username):
                errors.username = USERNAME_REQUIRED
            if validation.is_null_or_empty(form.email):
                errors.email = EMAIL_REQUIRED
            if validation.is_null_or_empty(form.password):
                errors.password = PASSWORD_REQUIRED
            if validation.is_null_or_empty(form.confirm_password):
                errors.cpassword = CPASSWORD_REQUIRED

            if errors.username is None and not validation.is_alphanumeric_starting_with_letter(form.username):
                errors.username = USERNAME_INVALID
            if errors.email is None and not validation.is_valid_email(form.email):
                errors.email = EMAIL_INVALID
            if errors.password is None and not validation.is_valid_password(form.password):
                errors.password = PASSWORD_WEAK
            if errors.cpassword is None and not validation.do_passwords_match(form.password, form.confirm_password):
                errors.cpassword = PASSWORDS_MISMATCH

            # Fast path only; the unique constraint on insert is authoritative
            if self.user_manager.get_user_by_username(form.username) is not None:
                errors.username = USERNAME_TAKEN
        except Exception:
            logger.exception("Registration validation failed")
            return FormErrors.generic(INVALID_INPUT)
        return errors

    def build_user(self, form: RegistrationForm, profile_picture: Optional[str]) -> User:
        """Assemble the record to store from a validated form.

        Raises:
            RoleNotFoundError: If the default user role is not seeded.
        """
        role = self.role_manager.get_role(DEFAULT_USER_ROLE)
        username = form.username.strip()
        return User(
            fullname=form.fullname.strip(),
            email=form.email.strip(),
            username=username,
            password_hash=hash_password(username, form.password),
            role_id=role.role_id,
            profile_picture=profile_picture,
        )

    def register(
        self, form: RegistrationForm, upload: Optional[UploadFile] = None
    ) -> RegistrationResult:
        """Run a registration attempt from submitted form to outcome.

        Args:
            form: Submitted registration fields.
            upload: Optional profile picture file part.

        Returns:
            RedirectResult to the login page on success, otherwise a
            RenderResult carrying the errors and the non-secret form values.
        """
        values = form.prefill()
        errors = self.validate(form)
        if errors.has_errors():
            return RenderResult(errors, values)

        profile_picture = None
        try:
            profile_picture = self.image_store.try_store(upload)
            user = self.build_user(form, profile_picture)
            result = self.user_manager.create_user(user)
        except Exception:
            logger.exception("Unexpected error while registering '%s'", form.username)
            self.image_store.discard(profile_picture)
            return RenderResult(FormErrors.generic(UNEXPECTED_ERROR), values)

        if result.outcome == CreateOutcome.CREATED:
            return RedirectResult(LOGIN_PATH, notice=REGISTER_SUCCESS)

        # No account was created, so the picture has no owner
        self.image_store.discard(profile_picture)
        if result.outcome == CreateOutcome.UNAVAILABLE:
            return RenderResult(FormErrors.generic(SERVER_MAINTENANCE), values)
        if result.conflict:
            return RenderResult(FormErrors(username=USERNAME_TAKEN), values)
        return RenderResult(FormErrors.generic(REGISTER_REJECTED), values)
