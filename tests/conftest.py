"""Pytest fixtures for the blog backend tests."""

import os
import tempfile
from pathlib import Path

# Settings are cached on first import, so point them at scratch locations first
_SCRATCH = Path(tempfile.mkdtemp(prefix="blog-backend-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_SCRATCH / 'blog.db'}")
os.environ.setdefault("UPLOAD_DIR", str(_SCRATCH / "uploads"))
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.application.services.media_service import MediaManager
from app.domain.models.post import Post
from app.domain.models.user import User
from app.infrastructure.database import Base, build_engine, get_db
from app.infrastructure.repositories.post_repository import SQLAlchemyPostRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.interfaces.deps import get_media_manager
from app.main import app


@pytest.fixture
def db_session(tmp_path: Path):
    """Fresh SQLite database per test."""
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def media(tmp_path: Path) -> MediaManager:
    return MediaManager(str(tmp_path / "uploads"))


@pytest.fixture
def user_repo(db_session):
    return SQLAlchemyUserRepository(db_session, User)


@pytest.fixture
def post_repo(db_session):
    return SQLAlchemyPostRepository(db_session, Post)


@pytest.fixture
def client(db_session, media) -> TestClient:
    """Test client wired to the per-test database and upload dir."""
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_media_manager] = lambda: media
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client: TestClient):
    """Register a user and return (user_id, auth headers)."""

    def _register(name: str = "Ada Lovelace", email: str = "ada@example.com", password: str = "secret123"):
        response = client.post(
            "/api/users/register",
            json={"fullname": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        response = client.post("/api/users/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        data = response.json()
        return data["id"], {"Authorization": f"Bearer {data['token']}"}

    return _register
