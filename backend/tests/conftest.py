import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import faculty_portal.models  # noqa: F401
from faculty_portal.api.deps import get_db
from faculty_portal.core.security import create_access_token
from faculty_portal.db.base import Base
from faculty_portal.main import app

ADMIN_EMAIL = "admin@college.edu"
FACULTY_EMAIL = "asha.rao@college.edu"


def bearer(email: str, role: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(email, role=role)}"}


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture()
def admin_headers():
    return bearer(ADMIN_EMAIL, "admin")


@pytest.fixture()
def faculty_headers():
    return bearer(FACULTY_EMAIL, "faculty")
