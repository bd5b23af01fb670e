"""
Business-rule errors raised by the services.

Every error carries an HTTP status code and a stable machine-readable code.
The exception handlers in app.main render them as:

    {"success": false, "error": "<message>", "code": "<code>"}
"""

from typing import Any, Optional


class JobBoardError(Exception):
    """Base class for all expected, typed failures."""

    status_code: int = 400
    code: str = "error"
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class InvalidId(JobBoardError):
    code = "invalid_id"
    default_message = "Invalid ID format"


class NotFound(JobBoardError):
    status_code = 404
    code = "not_found"
    default_message = "Resource not found"


class Forbidden(JobBoardError):
    status_code = 403
    code = "forbidden"
    default_message = "Not authorized to perform this action"


class Inactive(JobBoardError):
    code = "job_inactive"
    default_message = "This job is no longer accepting applications"


class DuplicateApplication(JobBoardError):
    code = "duplicate_application"
    default_message = "You have already applied for this job"


class InvalidUpdate(JobBoardError):
    code = "invalid_update"
    default_message = "Invalid updates"


class ValidationFailed(JobBoardError):
    code = "validation_failed"
    default_message = "Validation failed"


class EmailAlreadyRegistered(JobBoardError):
    code = "email_registered"
    default_message = "Email already registered"


class InvalidCredentials(JobBoardError):
    status_code = 401
    code = "invalid_credentials"
    default_message = "Invalid or expired token"
