import os

# Keep app startup (init_db) off the on-disk default database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from vacation_backend.database import get_session  # noqa: E402
from vacation_backend.main import app  # noqa: E402
from vacation_backend.models.vacation import Vacation, VacationStatus  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. sqlite:///:memory: with StaticPool so ALL sessions share the same DB
# 2. check_same_thread=False required for TestClient/threaded access
# 3. Tables dropped and recreated per test so ids restart at 1
# 4. App dependency overridden to use test_engine (see client_fixture)
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session on a fresh schema"""
    SQLModel.metadata.drop_all(test_engine)
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session

    Override MUST be set BEFORE TestClient() and stay in place for the
    entire duration so the app never uses its own engine.
    """
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_vacation(session: Session):
    """Insert a vacation directly, bypassing the service rules"""

    def _make(username: str = "daggerok", status: VacationStatus = VacationStatus.CREATED, hours: int = 8, **kwargs):
        vacation = Vacation(username=username, status=status, hours=hours, **kwargs)
        session.add(vacation)
        session.commit()
        session.refresh(vacation)
        return vacation

    return _make
