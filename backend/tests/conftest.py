import os
from pathlib import Path
from unittest.mock import AsyncMock

from dotenv import load_dotenv
import pytest

# Must be set before app.database is imported
os.environ.setdefault("PYTEST_RUN", "1")
# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / '.env.test')

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.api.dependencies import get_db  # noqa: E402
from app.models.base import BaseModel  # noqa: E402


# Patch outbound email for all tests
@pytest.fixture(autouse=True)
def patch_send_email(monkeypatch):
    """Replace the SMTP sender used by booking notifications with an AsyncMock."""
    mock = AsyncMock()
    monkeypatch.setattr("app.utils.notifications.send_email", mock)
    return mock


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _fk_on(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON;")
        cursor.close()

    BaseModel.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)

    def override_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_db
    yield Session
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    return TestClient(app)
