"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ats_api import models
from ats_api.config.database import Base, get_db
from ats_api.main import app


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session in a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """A session for arranging and inspecting test data."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the in-memory database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def education_data():
    """Education input as it arrives from the frontend."""
    return {
        "institution": "Test University",
        "title": "Bachelor of Science",
        "startDate": "2020-01-01",
        "endDate": "2024-01-01",
    }


@pytest.fixture
def candidate_payload():
    """Candidate JSON body with nested history."""
    return {
        "firstName": "Edu",
        "lastName": "Test",
        "email": "edu.test@example.com",
        "phone": "+34 600123456",
        "address": "Test Address 123",
        "educations": [
            {
                "institution": "Test University",
                "title": "Test Degree",
                "startDate": "2020-01-01",
                "endDate": "2024-01-01",
            }
        ],
        "workExperiences": [
            {
                "company": "Test Company",
                "position": "Test Position",
                "description": "Test Description",
                "startDate": "2020-01-01",
                "endDate": "2024-01-01",
            }
        ],
    }


@pytest.fixture
def sample_positions(db_session):
    """One published and one draft position."""
    published = models.Position(
        title="Software Engineer",
        description="Develop and maintain software applications.",
        status="Open",
        is_visible=True,
        location="Remote",
        employment_type="Full-time",
        salary_min=50000,
        salary_max=80000,
    )
    draft = models.Position(
        title="Data Scientist",
        status="Borrador",
        is_visible=False,
        location="Madrid",
    )
    db_session.add_all([published, draft])
    db_session.commit()
    return {"published": published.id, "draft": draft.id}

