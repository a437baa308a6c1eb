# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Importing the registry makes sure every table is known to Base.metadata.
from studyhub.db.base import Base
from studyhub.db.database import get_db
from studyhub.services.database_service import DatabaseService


@pytest.fixture
def db_session():
    """
    Creates a fresh in-memory SQLite database for EACH test function.
    StaticPool keeps the single connection alive so the TestClient's worker
    thread sees the same database as the test body.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_service(db_session):
    """A DatabaseService bound to the per-test database."""
    return DatabaseService(db_session=db_session)


@pytest.fixture
def client(db_session):
    """
    A TestClient whose requests run against the per-test database. The app's
    lifespan is not entered, so nothing touches the configured DATABASE_URL.
    """
    from studyhub.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
