"""Shared fixtures: in-memory database, image directory and HTTP client."""

from __future__ import annotations

import os

# Cheap hashes for tests; must be set before config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import app
from core.database import get_db, seed_reference_data
from core.dependencies import get_image_store
from models.base import Base
from utils.image_store import ImageStore

VALID_FORM = {
    "fullname": "Ada Lovelace",
    "email": "ada@example.com",
    "username": "ada",
    "password": "Secret#123",
    "cPassword": "Secret#123",
}


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = factory()
    try:
        seed_reference_data(db)
    finally:
        db.close()
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def image_store(tmp_path):
    return ImageStore(upload_dir=tmp_path / "images")


@pytest.fixture
def client(session_factory, image_store):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_image_store] = lambda: image_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def valid_form():
    return dict(VALID_FORM)
