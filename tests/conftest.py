"""
Pytest configuration and shared fixtures for the Job Board API tests.

MongoDB is replaced by mongomock; the services receive mongomock
collections directly, and the FastAPI app gets them through
dependency overrides.
"""
import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-jwt-tokens-1234567890")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timezone

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.api.dependencies import get_application_service, get_job_repository
from app.core.auth import create_access_token, get_user_service, hash_password
from app.main import app
from app.services.application_service import ApplicationService
from app.services.job_repository import JobRepository
from app.services.user_service import UserService


FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


# Store fixtures
@pytest.fixture
def mongo_db():
    """A fresh in-memory database per test."""
    client = mongomock.MongoClient()
    yield client["job_board_test"]
    client.close()


@pytest.fixture
def job_repo(mongo_db):
    return JobRepository(mongo_db["jobs"])


@pytest.fixture
def application_service(mongo_db):
    return ApplicationService(mongo_db["jobs"])


@pytest.fixture
def user_service(mongo_db):
    return UserService(mongo_db["users"])


# Identity fixtures
@pytest.fixture
def owner_id():
    return str(ObjectId())


@pytest.fixture
def other_user_id():
    return str(ObjectId())


# Job Test Data
@pytest.fixture
def sample_job_data():
    """Validated job fields as the API layer hands them to the repository."""
    return {
        "title": "Senior Python Developer",
        "company": "Tech Solutions Inc",
        "location": "San Francisco, CA",
        "type": "full-time",
        "salary": "$120,000 - $150,000",
        "description": "We are looking for a senior Python developer to own our API platform.",
        "requirements": "Python, FastAPI, MongoDB, Docker",
        "contact_email": "hr@techsolutions.com",
    }


@pytest.fixture
def sample_application_data():
    return {
        "full_name": "Alex Rodriguez",
        "email": "alex.rodriguez@email.com",
        "phone": "+1-555-0123",
        "cover_letter": "I have five years of Python experience.",
        "resume": "alex-rodriguez-resume.pdf",
    }


@pytest.fixture
def created_job(job_repo, sample_job_data, owner_id):
    """An active job owned by owner_id."""
    return job_repo.create(sample_job_data, owner_id)


# API fixtures
@pytest.fixture
def test_client(job_repo, application_service, user_service):
    """Test client with every service bound to the mongomock database."""
    app.dependency_overrides[get_job_repository] = lambda: job_repo
    app.dependency_overrides[get_application_service] = lambda: application_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def _register(user_service, name, email):
    user = user_service.create(name, email, hash_password("testpassword123"))
    token = create_access_token(data={"sub": str(user["_id"])})
    return user, {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner(user_service):
    """A registered user and its auth headers."""
    return _register(user_service, "John Smith", "john@techcorp.com")


@pytest.fixture
def other_user(user_service):
    return _register(user_service, "Mike Chen", "mike@dataflow.com")
