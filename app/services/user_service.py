"""
User Service - account storage for posting owners.
"""

from typing import Optional

from pymongo.errors import DuplicateKeyError

from app.core.exceptions import EmailAlreadyRegistered
from app.db.mongodb import COLLECTIONS
from app.services.mongo_service import MongoService, to_object_id
from app.utils.logging_config import get_logger
from app.utils.time_utils import utc_now

logger = get_logger(__name__)


def serialize_user(doc: dict) -> dict:
    """Public view of a user document (never includes the password hash)."""
    return {
        "user_id": str(doc["_id"]),
        "name": doc["name"],
        "email": doc["email"],
        "created_at": doc.get("created_at"),
    }


class UserService(MongoService):
    """Handles user documents."""

    collection_name = COLLECTIONS["users"]

    def create(self, name: str, email: str, password_hash: str) -> dict:
        """
        Insert a user.

        Raises:
            EmailAlreadyRegistered: an account with this email exists
        """
        email = email.strip().lower()
        if self.get_by_email(email):
            raise EmailAlreadyRegistered()

        doc = {
            "name": name.strip(),
            "email": email,
            "password_hash": password_hash,
            "created_at": utc_now(),
        }
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            # Lost a race against a concurrent registration
            raise EmailAlreadyRegistered()
        doc["_id"] = result.inserted_id
        logger.info("User %s registered", result.inserted_id)
        return doc

    def get_by_email(self, email: str) -> Optional[dict]:
        return self.collection.find_one({"email": email.strip().lower()})

    def get_by_id(self, user_id: str) -> Optional[dict]:
        return self.collection.find_one({"_id": to_object_id(user_id, "user ID")})
