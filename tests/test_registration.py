"""Unit tests for the registration workflow."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest
from fastapi import UploadFile

from core.exceptions import RoleNotFoundError
from schemas.user import FormErrors, RegistrationForm, User
from utils import registration
from utils.registration import RedirectResult, RegistrationService, RenderResult
from utils.password import verify_password
from utils.role_manager import RoleManager
from utils.user_manager import CreateResult, UserManager


def _form(**overrides):
    fields = {
        "fullname": "Ada Lovelace",
        "email": "ada@example.com",
        "username": "ada",
        "password": "Secret#123",
        "confirm_password": "Secret#123",
    }
    fields.update(overrides)
    return RegistrationForm(**fields)


def _existing_user():
    return User(
        user_id=1,
        fullname="Someone Else",
        email="else@example.com",
        username="ada",
        password_hash="x",
        role_id=2,
    )


@pytest.fixture
def users():
    manager = MagicMock(spec=UserManager)
    manager.get_user_by_username.return_value = None
    manager.create_user.side_effect = lambda user: CreateResult.created(
        user.model_copy(update={"user_id": 1})
    )
    return manager


@pytest.fixture
def roles():
    manager = MagicMock(spec=RoleManager)
    manager.get_role.return_value = MagicMock(role_id=2)
    return manager


@pytest.fixture
def service(users, roles, image_store):
    return RegistrationService(users, roles, image_store)


class TestValidate:
    """Field checks, short-circuiting and the uniqueness lookup."""

    def test_valid_form(self, service):
        assert not service.validate(_form()).has_errors()

    @pytest.mark.parametrize(
        "field, key, message",
        [
            ("fullname", "fullname", registration.FULLNAME_REQUIRED),
            ("username", "username", registration.USERNAME_REQUIRED),
            ("email", "email", registration.EMAIL_REQUIRED),
            ("password", "password", registration.PASSWORD_REQUIRED),
            ("confirm_password", "cpassword", registration.CPASSWORD_REQUIRED),
        ],
    )
    def test_required_fields(self, service, users, field, key, message):
        """A missing field is reported and nothing is stored."""
        result = service.register(_form(**{field: ""}))
        assert isinstance(result, RenderResult)
        assert getattr(result.errors, key) == message
        users.create_user.assert_not_called()

    def test_empty_field_is_not_checked_further(self, service):
        errors = service.validate(_form(username="   "))
        assert errors.username == registration.USERNAME_REQUIRED

    def test_all_missing_collects_every_error(self, service):
        errors = service.validate(RegistrationForm())
        assert set(errors.to_attributes()) == {
            "error_fullname",
            "error_username",
            "error_email",
            "error_password",
            "error_cpassword",
        }

    def test_bad_username_shape(self, service):
        assert service.validate(_form(username="1ada")).username == registration.USERNAME_INVALID

    def test_bad_email(self, service):
        assert service.validate(_form(email="ada@")).email == registration.EMAIL_INVALID

    def test_weak_password(self, service):
        errors = service.validate(_form(password="weakpass", confirm_password="weakpass"))
        assert errors.password == registration.PASSWORD_WEAK
        assert errors.cpassword is None

    def test_mismatch_reported_even_when_password_is_weak(self, service):
        errors = service.validate(_form(password="weak", confirm_password="other"))
        assert errors.password == registration.PASSWORD_WEAK
        assert errors.cpassword == registration.PASSWORDS_MISMATCH

    def test_existing_username_overwrites_shape_error(self, service, users):
        users.get_user_by_username.return_value = _existing_user()
        errors = service.validate(_form(username="1ada"))
        assert errors.username == registration.USERNAME_TAKEN

    def test_unexpected_failure_collapses_to_generic_error(self, service, users):
        users.get_user_by_username.side_effect = RuntimeError("db down")
        errors = service.validate(_form(fullname=""))
        assert errors == FormErrors(error=registration.INVALID_INPUT)


class TestRegister:
    def test_success_redirects_to_login(self, service, users):
        result = service.register(_form())
        assert result == RedirectResult("/login", notice=registration.REGISTER_SUCCESS)
        stored = users.create_user.call_args[0][0]
        assert stored.role_id == 2
        assert stored.profile_picture is None
        assert verify_password("ada", "Secret#123", stored.password_hash)

    def test_invalid_form_never_persists(self, service, users):
        result = service.register(_form(email=""))
        assert isinstance(result, RenderResult)
        assert result.errors.email == registration.EMAIL_REQUIRED
        users.create_user.assert_not_called()

    def test_existing_username_never_persists(self, service, users):
        users.get_user_by_username.return_value = _existing_user()
        result = service.register(_form())
        assert result.errors.username == registration.USERNAME_TAKEN
        users.create_user.assert_not_called()

    def test_render_keeps_input_but_not_passwords(self, service):
        result = service.register(_form(email="bad"))
        context = result.context()
        assert context["fullname"] == "Ada Lovelace"
        assert context["username"] == "ada"
        assert context["email"] == "bad"
        assert "password" not in context
        assert "confirm_password" not in context
        assert "Secret#123" not in context.values()

    def test_unavailable_shows_maintenance(self, service, users):
        users.create_user.side_effect = None
        users.create_user.return_value = CreateResult.unavailable()
        result = service.register(_form())
        assert result.errors == FormErrors(error=registration.SERVER_MAINTENANCE)
        assert result.values == {
            "fullname": "Ada Lovelace",
            "username": "ada",
            "email": "ada@example.com",
        }

    def test_rejected_shows_retry_message(self, service, users):
        users.create_user.side_effect = None
        users.create_user.return_value = CreateResult.rejected()
        result = service.register(_form())
        assert result.errors == FormErrors(error=registration.REGISTER_REJECTED)

    def test_constraint_conflict_reported_on_username(self, service, users):
        users.create_user.side_effect = None
        users.create_user.return_value = CreateResult.rejected(conflict=True)
        result = service.register(_form())
        assert result.errors == FormErrors(username=registration.USERNAME_TAKEN)

    def test_missing_role_is_unexpected_error(self, service, roles, users):
        roles.get_role.side_effect = RoleNotFoundError("user")
        result = service.register(_form())
        assert result.errors == FormErrors(error=registration.UNEXPECTED_ERROR)
        users.create_user.assert_not_called()

    def test_bad_image_is_unexpected_error(self, service, users):
        upload = UploadFile(file=io.BytesIO(b"MZ"), filename="virus.exe")
        result = service.register(_form(), upload)
        assert result.errors == FormErrors(error=registration.UNEXPECTED_ERROR)
        users.create_user.assert_not_called()

    def test_profile_picture_path_recorded(self, service, users, image_store):
        upload = UploadFile(file=io.BytesIO(b"\x89PNG"), filename="ada.png")
        service.register(_form(), upload)
        stored = users.create_user.call_args[0][0]
        assert stored.profile_picture.startswith("/images/")
        assert stored.profile_picture.endswith("_ada.png")
        assert image_store.path_for(stored.profile_picture).read_bytes() == b"\x89PNG"


class TestPictureCleanup:
    """A picture is kept only when the account is created."""

    @pytest.mark.parametrize(
        "outcome",
        [
            CreateResult.unavailable(),
            CreateResult.rejected(),
            CreateResult.rejected(conflict=True),
        ],
    )
    def test_removed_when_not_created(self, service, users, image_store, outcome):
        users.create_user.side_effect = None
        users.create_user.return_value = outcome
        upload = UploadFile(file=io.BytesIO(b"\x89PNG"), filename="me.png")
        result = service.register(_form(), upload)
        assert isinstance(result, RenderResult)
        assert list(image_store.upload_dir.iterdir()) == []

    def test_removed_when_create_raises(self, service, users, image_store):
        users.create_user.side_effect = RuntimeError("connection reset")
        upload = UploadFile(file=io.BytesIO(b"\x89PNG"), filename="me.png")
        result = service.register(_form(), upload)
        assert result.errors == FormErrors(error=registration.UNEXPECTED_ERROR)
        assert list(image_store.upload_dir.iterdir()) == []

    def test_removed_when_role_missing(self, service, roles, image_store):
        roles.get_role.side_effect = RoleNotFoundError("user")
        upload = UploadFile(file=io.BytesIO(b"\x89PNG"), filename="me.png")
        service.register(_form(), upload)
        assert list(image_store.upload_dir.iterdir()) == []

    def test_kept_when_created(self, service, image_store):
        upload = UploadFile(file=io.BytesIO(b"\x89PNG"), filename="me.png")
        assert isinstance(service.register(_form(), upload), RedirectResult)
        assert len(list(image_store.upload_dir.iterdir())) == 1
