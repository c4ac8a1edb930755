"""Test configuration and fixtures."""

import os
from types import SimpleNamespace
from unittest.mock import MagicMock

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.database import Base, get_db, init_db  # noqa: E402
from app.core.security import create_token  # noqa: E402
from app.dependencies import (  # noqa: E402
    get_application_repository,
    get_company_repository,
    get_job_repository,
    get_user_repository,
)
from app.main import app  # noqa: E402 - must set env vars before importing
from app.repositories.application_repository import ApplicationRepository  # noqa: E402
from app.repositories.company_repository import CompanyRepository  # noqa: E402
from app.repositories.job_repository import JobRepository  # noqa: E402
from app.repositories.user_repository import UserRepository  # noqa: E402

# Use in-memory SQLite for tests
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class RecordingResult:
    returns_rows = True

    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return list(self._rows)


class RecordingSession:
    """Stands in for a Session: records statements, replays canned rows."""

    def __init__(self, rows=None):
        self.rows = rows or []
        self.statements = []
        self.commits = 0

    def execute(self, statement, params=None):
        self.statements.append((str(statement), params or {}))
        return RecordingResult(self.rows)

    def commit(self):
        self.commits += 1


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    init_db(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def recording_session():
    return RecordingSession()


@pytest.fixture
def repos():
    """Mocked repositories served to the routes."""
    return SimpleNamespace(
        companies=MagicMock(spec=CompanyRepository),
        jobs=MagicMock(spec=JobRepository),
        users=MagicMock(spec=UserRepository),
        applications=MagicMock(spec=ApplicationRepository),
    )


@pytest.fixture
def client(repos):
    """Test client whose routes talk to the mocked repositories."""
    app.dependency_overrides[get_company_repository] = lambda: repos.companies
    app.dependency_overrides[get_job_repository] = lambda: repos.jobs
    app.dependency_overrides[get_user_repository] = lambda: repos.users
    app.dependency_overrides[get_application_repository] = lambda: repos.applications
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def db_client(db_session):
    """Test client backed by the in-memory SQLite database."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {create_token('u1', is_admin=False)}"}
