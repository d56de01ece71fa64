"""Configuration module for Quillpress.

This module provides centralized configuration management, including directory
paths, web server settings, password hashing cost, image upload limits and
reference data defaults. All configuration values can be overridden via
environment variables.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

# Data directory name
DATA_DIR_NAME = "data"
DATA_DIR = Path(os.getenv("DATA_DIR", str(ROOT_DIR / DATA_DIR_NAME)))

# --- Database Configuration ---

DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR / 'quillpress.db'}"
)

# --- Web Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# Secret used to sign the session cookie. Override in production.
SESSION_SECRET_KEY: str = os.getenv(
    "SESSION_SECRET_KEY", "your-secret-key-change-in-production"
)

LOGIN_PATH: str = "/login"
HOME_PATH: str = "/"

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Password Hashing Configuration ---

# Bcrypt cost factor (higher = more secure but slower)
BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

# --- Profile Picture Configuration ---

IMAGE_UPLOAD_DIR = Path(os.getenv("IMAGE_UPLOAD_DIR", str(DATA_DIR / "images")))

# Public URL prefix stored on the user record
IMAGE_URL_PREFIX: str = "/images/"

_ALLOWED_IMAGE_EXTENSIONS_STR: str = os.getenv(
    "ALLOWED_IMAGE_EXTENSIONS", ".jpg,.jpeg,.png,.gif,.webp"
)
ALLOWED_IMAGE_EXTENSIONS: List[str] = [
    ext.strip().lower()
    for ext in _ALLOWED_IMAGE_EXTENSIONS_STR.split(",")
    if ext.strip()
]

MAX_IMAGE_BYTES: int = int(os.getenv("MAX_IMAGE_BYTES", str(5 * 1024 * 1024)))

# --- Reference Data Configuration ---

# Role assigned to self-registered accounts
DEFAULT_USER_ROLE: str = "user"

DEFAULT_ROLES: List[str] = ["admin", DEFAULT_USER_ROLE]

DEFAULT_CATEGORIES: List[str] = [
    "Technology",
    "Health",
    "Travel",
    "Lifestyle",
    "Food",
]
