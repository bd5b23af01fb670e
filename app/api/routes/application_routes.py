"""
Application Routes

POST /jobs/{job_id}/apply - Apply to a job (public)
GET /jobs/{job_id}/applications - List applications (job owner only)
PUT /jobs/{job_id}/applications/{application_id}/status - Review an application (job owner only)
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_application_service
from app.core.auth import get_current_user
from app.services.application_service import ApplicationService
from app.schemas.schemas import (
    ApplicationCreate, ApplicationStatusUpdate, ApplicationMessageResponse,
    ApplicationListResponse
)

router = APIRouter(prefix="/jobs", tags=["Applications"])


@router.post("/{job_id}/apply", response_model=ApplicationMessageResponse, status_code=201)
async def apply_to_job(
    job_id: str,
    application: ApplicationCreate,
    service: ApplicationService = Depends(get_application_service)
):
    """Apply to an active job. One application per email per job."""
    created = service.apply(job_id, application.model_dump(mode="json"))
    return {"message": "Application submitted successfully", "application": created}


@router.get("/{job_id}/applications", response_model=ApplicationListResponse)
async def get_job_applications(
    job_id: str,
    user: dict = Depends(get_current_user),
    service: ApplicationService = Depends(get_application_service)
):
    """All applications received for a job, with status counts."""
    return service.list_for_job(job_id, user["user_id"])


@router.put(
    "/{job_id}/applications/{application_id}/status",
    response_model=ApplicationMessageResponse
)
async def update_application_status(
    job_id: str,
    application_id: str,
    update: ApplicationStatusUpdate,
    user: dict = Depends(get_current_user),
    service: ApplicationService = Depends(get_application_service)
):
    """Set the status (and optional notes) of an application."""
    updated = service.update_status(
        job_id, application_id, user["user_id"], update.status, notes=update.notes
    )
    return {"message": "Application status updated successfully", "application": updated}
