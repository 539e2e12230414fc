"""
MongoDB Connection Utility

MongoDB stores the user documents:
- identity (fullname, email, phoneNumber, role)
- bcrypt password hash
- embedded profile (bio, skills, resume, profile photo)

The email uniqueness invariant is enforced by a unique index, not by
application-level locking.
"""
import logging
from functools import lru_cache

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from jobportal.core.config import get_settings

logger = logging.getLogger(__name__)

# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": get_settings().users_collection,
}


@lru_cache()
def get_mongo_client() -> MongoClient:
    """Get or create the MongoDB client (connection pooling handled by pymongo)"""
    return MongoClient(get_settings().mongodb_uri)


def get_mongo_db() -> Database:
    """Get the application database"""
    return get_mongo_client()[get_settings().mongodb_db]


def get_collection(name: str) -> Collection:
    """Get a specific collection by its key in COLLECTIONS."""
    return get_mongo_db()[COLLECTIONS[name]]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        get_mongo_client().admin.command('ping')
        return True
    except PyMongoError as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(users: Collection) -> None:
    """
    Create indexes on the users collection.
    Call this once during app startup.
    """
    users.create_index([("email", ASCENDING)], unique=True, name="email_unique")
    logger.info("MongoDB indexes created on %s", users.name)
