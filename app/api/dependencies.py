"""
Service dependencies for route handlers.

Tests swap these out through app.dependency_overrides.
"""

from app.services.application_service import ApplicationService
from app.services.job_repository import JobRepository


def get_job_repository() -> JobRepository:
    return JobRepository()


def get_application_service() -> ApplicationService:
    return ApplicationService()
