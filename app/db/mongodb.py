"""
MongoDB Connection Utility

MongoDB stores:
- Job postings, each with its applicants embedded
- User accounts (posting owners)

WHY embed applicants in the job?
- An application has no life outside its job posting
- Duplicate check + append is a single-document atomic update
- Listing a job's applications is one read, no joins
"""
from typing import Optional

from pymongo import ASCENDING, DESCENDING, TEXT, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.config import get_settings
from app.utils.logging_config import get_logger

logger = get_logger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None
_db: Optional[Database] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
        logger.info("MongoDB client created for %s", settings.mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the job board database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """
    Get a specific collection.
    Collections we'll use:
    - jobs: Job postings with embedded applicants
    - users: Registered users who post jobs
    """
    db = get_mongo_db()
    return db[name]


def close_mongo_client() -> None:
    """Close the shared client. Call once on application shutdown."""
    global _client, _db
    if _client is not None:
        _client.close()
        logger.info("MongoDB client closed")
    _client = None
    _db = None


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "jobs": "jobs",
    "users": "users"
}


def init_mongo_indexes(db: Optional[Database] = None) -> None:
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()
    jobs = db[COLLECTIONS["jobs"]]

    # Full-text search over listings
    jobs.create_index(
        [("title", TEXT), ("company", TEXT), ("description", TEXT)],
        name="job_text_search"
    )
    jobs.create_index([("location", ASCENDING)])
    jobs.create_index([("type", ASCENDING)])
    jobs.create_index([("posted_by", ASCENDING)])
    jobs.create_index([("created_at", DESCENDING)])

    # One account per email
    db[COLLECTIONS["users"]].create_index("email", unique=True)

    logger.info("MongoDB indexes created successfully")
