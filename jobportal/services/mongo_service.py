"""
MongoDB Service - persistence for user documents.

Every mutation is a single atomic operation (insert_one or
find_one_and_update); email uniqueness is guaranteed by the unique index
created in jobportal.db.mongodb.init_mongo_indexes.
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from jobportal.core.errors import ConflictError
from jobportal.models.user import UserPatch


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse an id; None when it is not a well-formed ObjectId."""
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would mint a fresh id
    if value is None:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class UserDocumentService:
    """
    Handles user document storage.
    The collection is passed in, so tests can hand over an in-memory one.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def insert(self, doc: Dict[str, Any]) -> str:
        """
        Insert a new user document.

        Returns:
            MongoDB ObjectId as string

        Raises:
            ConflictError if the email is already taken
        """
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise ConflictError("User already exists with this email.")
        return str(result.inserted_id)

    def find_by_email(self, email: str) -> Optional[dict]:
        return self.collection.find_one({"email": email})

    def find_by_id(self, user_id: Any) -> Optional[dict]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def apply_patch(self, user_id: Any, patch: UserPatch) -> Optional[dict]:
        """
        Apply a partial update and return the updated document.

        Returns None when no document matches user_id.

        Raises:
            ConflictError if the patch moves the user onto a taken email
        """
        oid = to_object_id(user_id)
        if oid is None:
            return None
        try:
            return self.collection.find_one_and_update(
                {"_id": oid},
                patch.to_update(),
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ConflictError("User already exists with this email.")
