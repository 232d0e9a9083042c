"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Admin and regular users with their bearer tokens
- Seed companies and jobs
"""

import os

# Point the application engine at SQLite before anything imports it
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.database import Base, get_db
from jobboard.core.security import create_user_token, get_password_hash
from jobboard.models import Company, Job, User
from main import app

# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
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
def make_user(db_session):
    """Factory creating users straight in the database"""
    def _make_user(username, is_admin=False, password="password1"):
        user = User(
            username=username,
            hashed_password=get_password_hash(password),
            first_name="Test",
            last_name="User",
            email=f"{username}@example.com",
            is_admin=is_admin,
        )
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user

@pytest.fixture
def admin_headers(make_user):
    admin = make_user("admin", is_admin=True)
    return {"Authorization": f"Bearer {create_user_token(admin)}"}

@pytest.fixture
def user_headers(make_user):
    user = make_user("u1")
    return {"Authorization": f"Bearer {create_user_token(user)}"}

@pytest.fixture
def seed_jobs(db_session):
    """
    Two companies and three jobs:

    - j1: salary 100, equity 0.1 (c1)
    - j2: salary 200, equity 0 (c1)
    - j3: no salary, no equity (c2)

    Returns the job ids keyed by title.
    """
    db_session.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
    ])
    jobs = [
        Job(title="j1", salary=100, equity=0.1, company_handle="c1"),
        Job(title="j2", salary=200, equity=0.0, company_handle="c1"),
        Job(title="j3", salary=None, equity=None, company_handle="c2"),
    ]
    db_session.add_all(jobs)
    db_session.commit()
    return {job.title: job.id for job in jobs}
