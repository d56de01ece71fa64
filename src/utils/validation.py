"""Form field validation rules.

Pure predicates used by the registration and login views. None of them touch
the database.
"""

import re
from typing import Optional

USERNAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")
EMAIL_PATTERN = re.compile(r"^[\w.+-]+@[\w-]+(\.[\w-]+)*\.[A-Za-z]{2,}$")

MIN_PASSWORD_LENGTH = 8


def is_null_or_empty(value: Optional[str]) -> bool:
    """Return True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


def is_alphanumeric_starting_with_letter(value: Optional[str]) -> bool:
    """Check the username shape: a letter followed by letters or digits."""
    if value is None:
        return False
    return USERNAME_PATTERN.fullmatch(value) is not None


def is_valid_email(value: Optional[str]) -> bool:
    if value is None:
        return False
    return EMAIL_PATTERN.fullmatch(value.strip()) is not None


def is_valid_password(value: Optional[str]) -> bool:
    """Check the password strength policy.

    A valid password has at least 8 characters, one uppercase letter, one
    digit and one symbol (any character that is neither a letter nor a digit).

    Args:
        value: Plain text password.

    Returns:
        True if the password satisfies every rule, False otherwise.
    """
    if value is None or len(value) < MIN_PASSWORD_LENGTH:
        return False
    has_upper = any(ch.isupper() for ch in value)
    has_digit = any(ch.isdigit() for ch in value)
    has_symbol = any(not ch.isalnum() for ch in value)
    return has_upper and has_digit and has_symbol


def do_passwords_match(password: Optional[str], confirm_password: Optional[str]) -> bool:
    return password is not None and password == confirm_password
