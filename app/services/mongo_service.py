"""
MongoDB Service - shared plumbing for the collection-backed services.

Each service wraps exactly one collection:
1. jobs  - JobRepository / ApplicationService
2. users - UserService

The collection can be injected (tests pass a mongomock collection);
otherwise it is taken from the process-wide client.
"""

from typing import Any, Optional

from bson import ObjectId
from pymongo.collection import Collection

from app.core.exceptions import InvalidId
from app.db.mongodb import get_collection


# ============================================================
# HELPER: Validate and convert string ids
# ============================================================

def to_object_id(value: Any, label: str = "ID") -> ObjectId:
    """Convert a path/token id to ObjectId, raising InvalidId if malformed."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidId(f"Invalid {label} format")
    return ObjectId(value)


def is_owner(doc: dict, user_id: Any, field: str = "posted_by") -> bool:
    """Compare an owner reference with a user id, whatever their types."""
    owner = doc.get(field)
    return owner is not None and str(owner) == str(user_id)


class MongoService:
    """Base class: binds a service to one collection."""

    collection_name: str = ""

    def __init__(self, collection: Optional[Collection] = None):
        if collection is None:
            collection = get_collection(self.collection_name)
        self.collection: Collection = collection
