"""Database connection and session management.

This module handles the database connection using SQLAlchemy.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from config import DATA_DIR, DATABASE_URL
from models.base import Base
# Import models to ensure they are registered with Base.metadata
import models  # noqa: F401

SQLALCHEMY_DATABASE_URL = DATABASE_URL

_connect_args = (
    {"check_same_thread": False}
    if SQLALCHEMY_DATABASE_URL.startswith("sqlite")
    else {}
)

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=_connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def seed_reference_data(db: Session) -> None:
    """Insert the default roles and categories when they are missing."""
    # Imported here to avoid a cycle: the managers import the models package
    from utils.category_manager import CategoryManager
    from utils.role_manager import RoleManager

    RoleManager(db).ensure_default_roles()
    CategoryManager(db).ensure_default_categories()


def init_db() -> None:
    """Create tables if they do not exist and seed reference data."""
    if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
        # Ensure data directory exists
        DATA_DIR.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_reference_data(db)
    finally:
        db.close()


def get_db():
    """Dependency for getting a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
