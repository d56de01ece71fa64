"""Shared Jinja2 template renderer for the HTML routes."""

from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

# Packaged with api as package data
TEMPLATE_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def session_username(request: Request) -> Optional[str]:
    """Return the username bound to the current session, if any."""
    return request.session.get("username")
