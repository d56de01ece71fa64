"""Authentication routes.

This module handles the HTML pages for account registration, login and
logout. The logged-in username is kept in the signed session cookie.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, Request, UploadFile, status
from fastapi.responses import RedirectResponse, Response

from api.templating import session_username, templates
from config import HOME_PATH, LOGIN_PATH
from core.dependencies import RegistrationServiceDep, UserManagerDep
from schemas.user import LoginForm, RegistrationForm
from utils import validation
from utils.registration import RedirectResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

REGISTER_TEMPLATE = "register.html"
LOGIN_TEMPLATE = "login.html"

LOGIN_USERNAME_REQUIRED = "Username is required."
LOGIN_PASSWORD_REQUIRED = "Password is required."
LOGIN_FAILED = "Invalid username or password."


def _redirect(location: str) -> RedirectResponse:
    return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/register", summary="Registration form")
def register_form(request: Request) -> Response:
    """Render the registration form, or go home if already logged in."""
    if session_username(request) is not None:
        return _redirect(HOME_PATH)
    return templates.TemplateResponse(request, REGISTER_TEMPLATE, {})


@router.post("/register", summary="Register a new account")
def register(
    request: Request,
    service: RegistrationServiceDep,
    fullname: Optional[str] = Form(default=None),
    email: Optional[str] = Form(default=None),
    username: Optional[str] = Form(default=None),
    password: Optional[str] = Form(default=None),
    confirm_password: Optional[str] = Form(default=None, alias="cPassword"),
    profile_picture: Optional[UploadFile] = File(default=None),
) -> Response:
    """Register a new user from the submitted form.

    On success a one-time notice is stored in the session and the client is
    redirected to the login page. Otherwise the form is rendered again with
    the errors and the previously entered fullname, username and email.
    """
    form = RegistrationForm(
        fullname=fullname,
        email=email,
        username=username,
        password=password,
        confirm_password=confirm_password,
    )
    result = service.register(form, profile_picture)

    if isinstance(result, RedirectResult):
        if result.notice:
            request.session["success"] = result.notice
        return _redirect(result.location)

    return templates.TemplateResponse(request, REGISTER_TEMPLATE, result.context())


@router.get("/login", summary="Login form")
def login_form(request: Request) -> Response:
    """Render the login form, showing the registration notice once."""
    if session_username(request) is not None:
        return _redirect(HOME_PATH)
    context = {}
    success = request.session.pop("success", None)
    if success:
        context["success"] = success
    return templates.TemplateResponse(request, LOGIN_TEMPLATE, context)


@router.post("/login", summary="Log in")
def login(
    request: Request,
    user_manager: UserManagerDep,
    username: Optional[str] = Form(default=None),
    password: Optional[str] = Form(default=None),
) -> Response:
    """Log in with username and password."""
    form = LoginForm(username=username, password=password)
    context = {"username": form.username or ""}

    if validation.is_null_or_empty(form.username):
        context["error_username"] = LOGIN_USERNAME_REQUIRED
    if validation.is_null_or_empty(form.password):
        context["error_password"] = LOGIN_PASSWORD_REQUIRED
    if len(context) > 1:
        return templates.TemplateResponse(request, LOGIN_TEMPLATE, context)

    user = user_manager.authenticate(form.username.strip(), form.password)
    if user is None:
        logger.info("Failed login for '%s'", form.username)
        context["error"] = LOGIN_FAILED
        return templates.TemplateResponse(request, LOGIN_TEMPLATE, context)

    request.session["username"] = user.username
    logger.info("User logged in: %s", user.username)
    return _redirect(HOME_PATH)


@router.get("/logout", summary="Log out")
def logout(request: Request) -> Response:
    request.session.clear()
    return _redirect(LOGIN_PATH)
