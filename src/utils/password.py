"""Password hashing utilities.

Passwords are hashed with bcrypt. The username and password are first folded
into a fixed-length SHA-256 digest so that bcrypt's 72-byte input limit never
truncates a long password, and so that the same password hashes to unrelated
material for different accounts.
"""

import base64
import hashlib
import logging

import bcrypt

from config import BCRYPT_ROUNDS

logger = logging.getLogger(__name__)


def _prehash(username: str, password: str) -> bytes:
    """Fold username and password into 44 bytes of base64 (below bcrypt's limit)."""
    material = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(hashlib.sha256(material).digest())


def hash_password(username: str, password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a password using bcrypt.

    Args:
        username: Account the password belongs to.
        password: Plain text password.
        rounds: Bcrypt cost factor.

    Returns:
        Hashed password (bcrypt hash string).
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(_prehash(username, password), salt)
    # bcrypt.hashpw returns bytes, we need to decode to string
    return hashed.decode("utf-8")


def verify_password(username: str, plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a bcrypt hash.

    Args:
        username: Account the password belongs to.
        plain_password: Plain text password to verify.
        hashed_password: Bcrypt hash string to verify against.

    Returns:
        True if password matches, False otherwise.
    """
    try:
        return bcrypt.checkpw(
            _prehash(username, plain_password), hashed_password.encode("utf-8")
        )
    except ValueError as e:
        logger.error("Password verification error: %s", e)
        return False
