"""
Job Service - presentation transforms and query building.

Pure functions, no database access:
- transform_job / transform_application: stored document -> API record
- build_job_filter: listing query params -> MongoDB filter
- calculate_application_stats / build_pagination: derived aggregates

Records use snake_case keys; the response schemas emit them as camelCase.
"""

import math
import random
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.utils.time_utils import get_time_ago


# ============================================================
# HELPER: ObjectId to string
# ============================================================

def _str_id(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def _parse_bool(value: Any) -> bool:
    """Accept real bools and the query-string forms 'true' / 'false'."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


# ============================================================
# JOB TRANSFORMS
# ============================================================

def extract_skills(requirements: Optional[str]) -> List[str]:
    """Split the free-text requirements on commas."""
    if not requirements:
        return []
    return [skill.strip() for skill in requirements.split(",") if skill.strip()]


def company_logo(company: str) -> str:
    """Initials of each word of the company name, e.g. 'Design Studio' -> 'DS'."""
    return "".join(word[0] for word in company.split()).upper()


def transform_job(
    job: dict,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None
) -> Dict[str, Any]:
    """
    Map a stored job document to the API-facing record.

    `featured` is a coin flip; pass a seeded `rng` for reproducible output.
    """
    rng = rng or random
    applicants = job.get("applicants") or []
    location = job.get("location", "")

    return {
        "id": str(job["_id"]),
        "title": job["title"],
        "company": job["company"],
        "location": location,
        "type": job["type"],
        "salary": job.get("salary") or "",
        "description": job["description"],
        "requirements": job.get("requirements") or "",
        "contact_email": job["contact_email"],
        "posted_by": _str_id(job.get("posted_by")),
        "posted_at": job.get("created_at"),
        "updated_at": job.get("updated_at"),
        "is_active": job.get("is_active", True),
        # Computed fields
        "posted": get_time_ago(job["created_at"], now) if job.get("created_at") else "Today",
        "skills": extract_skills(job.get("requirements")),
        "logo": company_logo(job["company"]),
        "featured": rng.random() > 0.5,
        "remote": "remote" in location.lower(),
        "applicant_count": len(applicants),
    }


def transform_job_summary(job: dict) -> Dict[str, Any]:
    """Short job header used alongside an application list."""
    return {
        "id": str(job["_id"]),
        "title": job["title"],
        "company": job["company"],
        "location": job["location"],
        "type": job["type"],
    }


def transform_job_with_stats(
    job: dict,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None
) -> Dict[str, Any]:
    """transform_job plus per-status applicant counts (owner dashboard)."""
    stats = calculate_application_stats(job.get("applicants") or [])
    record = transform_job(job, now=now, rng=rng)
    record.update({
        "total_applications": stats["total"],
        "pending_applications": stats["pending"],
        "shortlisted_applications": stats["shortlisted"],
        "rejected_applications": stats["rejected"],
        "hired_applications": stats["hired"],
    })
    return record


# ============================================================
# APPLICATION TRANSFORMS
# ============================================================

def transform_application(application: dict, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Map an embedded applicant sub-document to the API-facing record."""
    applied_at = application.get("applied_at")
    return {
        "id": str(application["_id"]),
        "full_name": application["full_name"],
        "email": application["email"],
        "phone": application.get("phone"),
        "cover_letter": application.get("cover_letter"),
        "resume": application.get("resume"),
        "applied_at": applied_at,
        "status": application.get("status", "pending"),
        "reviewed_at": application.get("reviewed_at"),
        "reviewed_by": _str_id(application.get("reviewed_by")),
        "notes": application.get("notes"),
        "time_ago": get_time_ago(applied_at, now) if applied_at else "Today",
    }


def calculate_application_stats(applications: List[dict]) -> Dict[str, int]:
    """
    Count applications per status.

    'reviewed' only contributes to the total; it has no bucket of its own.
    """
    statuses = [app.get("status", "pending") for app in applications]
    return {
        "total": len(statuses),
        "pending": statuses.count("pending"),
        "shortlisted": statuses.count("shortlisted"),
        "rejected": statuses.count("rejected"),
        "hired": statuses.count("hired"),
    }


# ============================================================
# LISTING: FILTER + PAGINATION
# ============================================================

def build_job_filter(query: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the MongoDB filter for the public job listing.

    Supported keys: search, location, type, remote.
    When `remote` is given it replaces any `location` constraint.
    """
    search = query.get("search")
    location = query.get("location")
    job_type = query.get("type")
    remote = query.get("remote")

    mongo_filter: Dict[str, Any] = {"is_active": True}

    if search:
        mongo_filter["$text"] = {"$search": search}

    if location:
        mongo_filter["location"] = {"$regex": re.escape(location), "$options": "i"}

    if job_type:
        mongo_filter["type"] = job_type

    if remote is not None and remote != "":
        if _parse_bool(remote):
            mongo_filter["location"] = {"$regex": "remote", "$options": "i"}
        else:
            mongo_filter["location"] = {"$not": re.compile("remote", re.IGNORECASE)}

    return mongo_filter


def build_pagination(page: int, limit: int, total: int) -> Dict[str, Any]:
    """Pagination metadata for a listing page."""
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "current_page": page,
        "total_pages": total_pages,
        "total_jobs": total,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
        "limit": limit,
    }
