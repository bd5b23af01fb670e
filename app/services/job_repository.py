"""
Job Repository - CRUD over the jobs collection.

Listing uses build_job_filter; shaping results for the API is left to the
transforms in app.services.job_service.
"""

from typing import Any, Dict, List, Optional, Tuple

from pymongo import DESCENDING, ReturnDocument

from app.core.exceptions import Forbidden, InvalidUpdate, NotFound
from app.db.mongodb import COLLECTIONS
from app.services.job_service import build_job_filter, transform_job_with_stats
from app.services.mongo_service import MongoService, is_owner, to_object_id
from app.utils.logging_config import get_logger
from app.utils.time_utils import utc_now

logger = get_logger(__name__)

# Fields a posting owner may change through update()
ALLOWED_UPDATES = frozenset({
    "title",
    "company",
    "location",
    "type",
    "salary",
    "description",
    "requirements",
    "contact_email",
    "is_active",
})

NEWEST_FIRST = [("created_at", DESCENDING)]


class JobRepository(MongoService):
    """Handles job posting storage."""

    collection_name = COLLECTIONS["jobs"]

    def list_jobs(
        self, query: Dict[str, Any], page: int = 1, limit: int = 10
    ) -> Tuple[List[dict], int]:
        """
        Fetch one page of active jobs matching the listing query.

        Returns:
            (jobs newest first, total number of matching jobs)
        """
        mongo_filter = build_job_filter(query)
        skip = (page - 1) * limit

        cursor = (
            self.collection.find(mongo_filter)
            .sort(NEWEST_FIRST)
            .skip(skip)
            .limit(limit)
        )
        jobs = list(cursor)
        total = self.collection.count_documents(mongo_filter)
        return jobs, total

    def find(self, job_id: str) -> Optional[dict]:
        """Raw lookup, ignoring the active flag."""
        return self.collection.find_one({"_id": to_object_id(job_id, "job ID")})

    def get_by_id(self, job_id: str) -> dict:
        """Fetch a job visible to the public; inactive jobs count as missing."""
        job = self.find(job_id)
        if job is None:
            raise NotFound("Job not found")
        if not job.get("is_active", True):
            raise NotFound("Job is no longer active")
        return job

    def create(self, fields: Dict[str, Any], owner_id: str) -> dict:
        """
        Insert a new job posting owned by `owner_id`.

        Args:
            fields: Validated job fields (title, company, location, type, ...)
            owner_id: Authenticated user id, becomes posted_by
        """
        now = utc_now()
        doc = {
            **fields,
            "posted_by": to_object_id(owner_id, "user ID"),
            "is_active": fields.get("is_active", True),
            "applicants": [],
            "created_at": now,
            "updated_at": now,
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Job %s created by %s", result.inserted_id, owner_id)
        return doc

    def _get_owned(self, job_id: str, owner_id: str, action: str) -> dict:
        job = self.find(job_id)
        if job is None:
            raise NotFound("Job not found")
        if not is_owner(job, owner_id):
            logger.warning("User %s denied %s on job %s", owner_id, action, job_id)
            raise Forbidden(f"Not authorized to {action} this job")
        return job

    def update(self, job_id: str, owner_id: str, patch: Dict[str, Any]) -> dict:
        """Apply a partial update; only the posting owner may do this."""
        job = self._get_owned(job_id, owner_id, "update")

        invalid = sorted(set(patch) - ALLOWED_UPDATES)
        if invalid:
            raise InvalidUpdate("Invalid updates", details=invalid)

        updated = self.collection.find_one_and_update(
            {"_id": job["_id"]},
            {"$set": {**patch, "updated_at": utc_now()}},
            return_document=ReturnDocument.AFTER
        )
        if updated is None:
            raise NotFound("Job not found")
        logger.info("Job %s updated (%s)", job_id, ", ".join(sorted(patch)) or "no fields")
        return updated

    def delete(self, job_id: str, owner_id: str) -> bool:
        """Remove a job and its embedded applications."""
        job = self._get_owned(job_id, owner_id, "delete")
        result = self.collection.delete_one({"_id": job["_id"]})
        logger.info("Job %s deleted by %s", job_id, owner_id)
        return result.deleted_count > 0

    def list_by_owner(self, owner_id: str) -> List[dict]:
        """All jobs posted by a user, active or not, newest first."""
        cursor = self.collection.find(
            {"posted_by": to_object_id(owner_id, "user ID")}
        ).sort(NEWEST_FIRST)
        return list(cursor)

    def list_by_owner_with_stats(self, owner_id: str) -> List[Dict[str, Any]]:
        """Owner's jobs, transformed, with per-status applicant counts."""
        return [transform_job_with_stats(job) for job in self.list_by_owner(owner_id)]
