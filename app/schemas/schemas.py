"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Python attributes are snake_case; JSON uses camelCase aliases
(both spellings are accepted on input).
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Optional, List
from datetime import datetime
from enum import Enum


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True
    )


# ============================================================
# ENUMS
# ============================================================

class JobType(str, Enum):
    full_time = "full-time"
    part_time = "part-time"
    contract = "contract"
    internship = "internship"


class ApplicationStatus(str, Enum):
    pending = "pending"
    reviewed = "reviewed"
    shortlisted = "shortlisted"
    rejected = "rejected"
    hired = "hired"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

class UserResponse(CamelModel):
    user_id: str
    name: str
    email: str
    created_at: Optional[datetime] = None

class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserResponse

class MeResponse(CamelModel):
    user: UserResponse


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(CamelModel):
    title: str = Field(..., min_length=5, max_length=100)
    company: str = Field(..., min_length=2, max_length=100)
    location: str = Field(..., min_length=2, max_length=100)
    type: JobType
    salary: Optional[str] = Field(None, max_length=50)
    description: str = Field(..., min_length=10, max_length=2000)
    requirements: Optional[str] = Field(None, max_length=1000)
    contact_email: EmailStr

    @field_validator("contact_email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()


class JobUpdate(JobCreate):
    """
    Partial update. Unknown keys are kept (extra="allow") so the repository
    can reject them as invalid updates instead of silently dropping them.
    Fields may be omitted but not cleared: an explicit null is rejected.
    """
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = Field(None, min_length=5, max_length=100)
    company: Optional[str] = Field(None, min_length=2, max_length=100)
    location: Optional[str] = Field(None, min_length=2, max_length=100)
    type: Optional[JobType] = None
    description: Optional[str] = Field(None, min_length=10, max_length=2000)
    contact_email: Optional[EmailStr] = None
    is_active: Optional[bool] = None

    @field_validator(
        "title", "company", "location", "type", "description", "contact_email", "is_active",
        mode="before"
    )
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # Only runs for keys present in the body; omitted keys keep the default
        if value is None:
            raise ValueError("cannot be null")
        return value

    @field_validator("contact_email")
    @classmethod
    def lowercase_email(cls, value: Optional[str]) -> Optional[str]:
        return value.lower() if value else value


class JobResponse(CamelModel):
    id: str
    title: str
    company: str
    location: str
    type: str
    salary: str = ""
    description: str
    requirements: str = ""
    contact_email: str
    posted_by: Optional[str] = None
    posted_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_active: bool = True
    posted: str
    skills: List[str] = []
    logo: str
    featured: bool = False
    remote: bool = False
    applicant_count: int = 0

class JobWithStatsResponse(JobResponse):
    total_applications: int = 0
    pending_applications: int = 0
    shortlisted_applications: int = 0
    rejected_applications: int = 0
    hired_applications: int = 0

class PaginationResponse(CamelModel):
    current_page: int
    total_pages: int
    total_jobs: int
    has_next_page: bool
    has_prev_page: bool
    limit: int

class JobListResponse(CamelModel):
    jobs: List[JobResponse]
    pagination: PaginationResponse

class JobDetailResponse(CamelModel):
    job: JobResponse

class JobMessageResponse(CamelModel):
    message: str
    job: JobResponse

class JobsResponse(CamelModel):
    jobs: List[JobResponse]

class JobsWithStatsResponse(CamelModel):
    jobs: List[JobWithStatsResponse]


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(CamelModel):
    full_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    cover_letter: Optional[str] = Field(None, max_length=2000)
    resume: Optional[str] = Field(None, max_length=500)

class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus
    notes: Optional[str] = Field(None, max_length=1000)

class ApplicationResponse(CamelModel):
    id: str
    full_name: str
    email: str
    phone: Optional[str] = None
    cover_letter: Optional[str] = None
    resume: Optional[str] = None
    applied_at: Optional[datetime] = None
    status: str
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    notes: Optional[str] = None
    time_ago: str

class ApplicationMessageResponse(CamelModel):
    message: str
    application: ApplicationResponse

class JobSummary(CamelModel):
    id: str
    title: str
    company: str
    location: str
    type: str

class ApplicationStats(CamelModel):
    total: int
    pending: int
    shortlisted: int
    rejected: int
    hired: int

class ApplicationListResponse(CamelModel):
    job: JobSummary
    applications: List[ApplicationResponse]
    stats: ApplicationStats


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(CamelModel):
    message: str
    success: bool = True

class ErrorResponse(CamelModel):
    success: bool = False
    error: str
    code: str
