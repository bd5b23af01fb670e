"""
Application Service - the applicant workflow on a job posting.

Applications live inside their job document (jobs.applicants), so every
mutation below is a single atomic update on that one document:

- apply: the duplicate-email guard is part of the update filter, so two
  concurrent applies with the same email cannot both match.
- update_status: a positional $set touches only the targeted applicant's
  review fields, leaving concurrent writes to other fields intact.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo import ReturnDocument

from app.core.exceptions import DuplicateApplication, Forbidden, Inactive, NotFound
from app.db.mongodb import COLLECTIONS
from app.services.job_service import (
    calculate_application_stats,
    transform_application,
    transform_job_summary
)
from app.services.mongo_service import MongoService, is_owner, to_object_id
from app.utils.logging_config import get_logger
from app.utils.time_utils import utc_now

logger = get_logger(__name__)

# Applicant-supplied fields copied into the embedded document
APPLICANT_FIELDS = ("full_name", "email", "phone", "cover_letter", "resume")


def _find_application(job: dict, application_id: ObjectId) -> Optional[dict]:
    for application in job.get("applicants") or []:
        if application.get("_id") == application_id:
            return application
    return None


class ApplicationService(MongoService):
    """Submit, list and review applications embedded in jobs."""

    # Shares the jobs collection with JobRepository
    collection_name = COLLECTIONS["jobs"]

    def _load_owned_job(self, job_id: str, requester_id: str, action: str) -> dict:
        job = self.collection.find_one({"_id": to_object_id(job_id, "job ID")})
        if job is None:
            raise NotFound("Job not found")
        if not is_owner(job, requester_id):
            logger.warning("User %s denied %s on job %s", requester_id, action, job_id)
            raise Forbidden(f"Not authorized to {action} applications for this job")
        return job

    def apply(
        self, job_id: str, fields: Dict[str, Any], now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Append a new pending application to an active job.

        Raises:
            NotFound: job does not exist
            Inactive: job is closed
            DuplicateApplication: this email already applied
        """
        oid = to_object_id(job_id, "job ID")
        now = now or utc_now()

        application = {key: fields.get(key) for key in APPLICANT_FIELDS}
        application["email"] = application["email"].strip().lower()
        application.update({
            "_id": ObjectId(),
            "applied_at": now,
            "status": "pending",
        })

        updated = self.collection.find_one_and_update(
            {
                "_id": oid,
                "is_active": {"$ne": False},
                "applicants.email": {"$ne": application["email"]},
            },
            {
                "$push": {"applicants": application},
                "$set": {"updated_at": now},
            },
            return_document=ReturnDocument.AFTER
        )

        if updated is None:
            # Nothing matched: work out which guard failed
            job = self.collection.find_one({"_id": oid}, {"is_active": 1})
            if job is None:
                raise NotFound("Job not found")
            if not job.get("is_active", True):
                raise Inactive()
            logger.warning("Duplicate application to job %s", job_id)
            raise DuplicateApplication()

        logger.info("Application %s submitted to job %s", application["_id"], job_id)
        return transform_application(application, now=now)

    def list_for_job(self, job_id: str, requester_id: str) -> Dict[str, Any]:
        """All applications of a job with status counts. Owner only."""
        job = self._load_owned_job(job_id, requester_id, "view")
        applicants = job.get("applicants") or []
        return {
            "job": transform_job_summary(job),
            "applications": [transform_application(app) for app in applicants],
            "stats": calculate_application_stats(applicants),
        }

    def update_status(
        self,
        job_id: str,
        application_id: str,
        requester_id: str,
        status: str,
        notes: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Set an application's status and stamp the review fields. Owner only.

        Any status may follow any other.
        """
        job = self._load_owned_job(job_id, requester_id, "update")
        app_oid = to_object_id(application_id, "application ID")
        if _find_application(job, app_oid) is None:
            raise NotFound("Application not found")

        now = now or utc_now()
        changes = {
            "applicants.$.status": status,
            "applicants.$.reviewed_at": now,
            "applicants.$.reviewed_by": to_object_id(requester_id, "user ID"),
            "updated_at": now,
        }
        if notes:
            changes["applicants.$.notes"] = notes

        updated = self.collection.find_one_and_update(
            {"_id": job["_id"], "applicants._id": app_oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER
        )
        application = _find_application(updated, app_oid) if updated else None
        if application is None:
            # Job deleted between the read and the write
            raise NotFound("Application not found")

        logger.info(
            "Application %s on job %s set to %s by %s",
            application_id, job_id, status, requester_id
        )
        return transform_application(application, now=now)
