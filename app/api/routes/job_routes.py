"""
Job Routes

GET /jobs - List active jobs with filters and pagination
GET /jobs/{job_id} - Get job details
POST /jobs - Create job posting (authenticated)
PUT /jobs/{job_id} - Update job (owner only)
DELETE /jobs/{job_id} - Delete job (owner only)
GET /jobs/user/my-jobs - Jobs posted by the current user
GET /jobs/user/my-jobs-with-applications - Same, with applicant counts
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.api.dependencies import get_job_repository
from app.core.auth import get_current_user
from app.core.config import get_settings
from app.services.job_repository import JobRepository
from app.services.job_service import build_pagination, transform_job
from app.schemas.schemas import (
    JobCreate, JobUpdate, JobType, JobListResponse, JobDetailResponse,
    JobMessageResponse, JobsResponse, JobsWithStatsResponse, MessageResponse
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])

settings = get_settings()


@router.get("", response_model=JobListResponse)
async def list_jobs(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    search: Optional[str] = Query(None, description="Full-text search in title, company, description"),
    location: Optional[str] = Query(None),
    job_type: Optional[JobType] = Query(None, alias="type"),
    remote: Optional[bool] = Query(None, description="Overrides location when set"),
    jobs: JobRepository = Depends(get_job_repository)
):
    """List active job postings with filters and pagination."""
    query = {
        "search": search,
        "location": location,
        "type": job_type.value if job_type else None,
        "remote": remote,
    }
    results, total = jobs.list_jobs(query, page=page, limit=limit)
    return {
        "jobs": [transform_job(job) for job in results],
        "pagination": build_pagination(page, limit, total),
    }


@router.get("/user/my-jobs", response_model=JobsResponse)
async def get_my_jobs(
    user: dict = Depends(get_current_user),
    jobs: JobRepository = Depends(get_job_repository)
):
    """Jobs posted by the authenticated user, including inactive ones."""
    return {"jobs": [transform_job(job) for job in jobs.list_by_owner(user["user_id"])]}


@router.get("/user/my-jobs-with-applications", response_model=JobsWithStatsResponse)
async def get_my_jobs_with_applications(
    user: dict = Depends(get_current_user),
    jobs: JobRepository = Depends(get_job_repository)
):
    """Jobs posted by the authenticated user with per-status applicant counts."""
    return {"jobs": jobs.list_by_owner_with_stats(user["user_id"])}


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(job_id: str, jobs: JobRepository = Depends(get_job_repository)):
    """Get details of a specific active job."""
    return {"job": transform_job(jobs.get_by_id(job_id))}


@router.post("", response_model=JobMessageResponse, status_code=201)
async def create_job(
    job: JobCreate,
    user: dict = Depends(get_current_user),
    jobs: JobRepository = Depends(get_job_repository)
):
    """Create a new job posting. The caller becomes its owner."""
    created = jobs.create(job.model_dump(mode="json", exclude_none=True), user["user_id"])
    return {"message": "Job posted successfully", "job": transform_job(created)}


@router.put("/{job_id}", response_model=JobMessageResponse)
async def update_job(
    job_id: str,
    update: JobUpdate,
    user: dict = Depends(get_current_user),
    jobs: JobRepository = Depends(get_job_repository)
):
    """Update a job posting. Only the owner can update."""
    updated = jobs.update(job_id, user["user_id"], update.model_dump(mode="json", exclude_unset=True))
    return {"message": "Job updated successfully", "job": transform_job(updated)}


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: str,
    user: dict = Depends(get_current_user),
    jobs: JobRepository = Depends(get_job_repository)
):
    """Delete a job posting along with its applications."""
    jobs.delete(job_id, user["user_id"])
    return MessageResponse(message="Job deleted successfully")
