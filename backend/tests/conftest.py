"""
Pytest configuration and shared fixtures.

Every test runs against a fresh in-memory SQLite database seeded with
three companies, three jobs and two users.
"""

import os

# Settings are read at import time, so these must be set before jobly loads.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["AUTO_CREATE_TABLES"] = "false"

from decimal import Decimal  # noqa: E402
from typing import Dict, Iterator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from jobly.core.database import Base, SessionLocal, engine  # noqa: E402
from jobly.core.security import create_access_token, hash_password  # noqa: E402
from jobly.main import app  # noqa: E402
from jobly.models import Application, Company, Job, User  # noqa: E402


def _seed(session: Session) -> Dict[str, int]:
    session.add_all([
        Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"),
        Company(handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img"),
        Company(handle="c3", name="C3", description="Desc3", num_employees=3, logo_url="http://c3.img"),
    ])
    session.flush()

    jobs = [
        Job(title="j1", salary=1, equity=Decimal("0.1"), company_handle="c1"),
        Job(title="j2", salary=20, equity=Decimal("0.2"), company_handle="c2"),
        Job(title="j3", salary=300, equity=Decimal("0.3"), company_handle="c3"),
    ]
    session.add_all(jobs)
    session.add_all([
        User(
            username="u1",
            password=hash_password("password1"),
            first_name="U1F",
            last_name="U1L",
            email="user1@user.com",
            is_admin=False,
        ),
        User(
            username="admin",
            password=hash_password("adminpass"),
            first_name="AdF",
            last_name="AdL",
            email="admin@user.com",
            is_admin=True,
        ),
    ])
    session.flush()
    ids = {job.title: job.id for job in jobs}
    session.add(Application(username="u1", job_id=ids["j1"]))
    session.commit()
    return ids


@pytest.fixture
def job_ids() -> Iterator[Dict[str, int]]:
    """Reset the schema, seed it, and return the seeded job ids by title."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        ids = _seed(session)
    finally:
        session.close()
    yield ids


@pytest.fixture
def db(job_ids) -> Iterator[Session]:
    """Session on the seeded database."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(job_ids) -> Iterator[TestClient]:
    """HTTP client on the seeded database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def u1_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token('u1', False)}"}


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token('admin', True)}"}
