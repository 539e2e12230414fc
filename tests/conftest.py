"""
Pytest fixtures for the job portal tests
"""

from typing import List, Tuple

import mongomock
import pytest
from fastapi.testclient import TestClient

from jobportal.core.auth import PasswordHasher, TokenIssuer
from jobportal.core.errors import UploadError
from jobportal.db.mongodb import init_mongo_indexes
from jobportal.schemas.schemas import RegisterRequest
from jobportal.services.media_service import UploadOutcome
from jobportal.services.mongo_service import UserDocumentService
from jobportal.services.user_service import UserService
from jobportal.utils.datauri import DataUri


class StubUploader:
    """Records uploads and answers with a fixed URL, or fails on demand."""

    def __init__(self):
        self.fail = False
        self.calls: List[Tuple[DataUri, str]] = []

    def upload(self, data_uri: DataUri, folder: str) -> UploadOutcome:
        self.calls.append((data_uri, folder))
        if self.fail:
            return UploadOutcome(error=UploadError("Media upload failed: timeout"))
        return UploadOutcome(secure_url=f"https://cdn.example.com/{folder}/{len(self.calls)}")


@pytest.fixture
def users_collection():
    """In-memory users collection with the unique email index"""
    collection = mongomock.MongoClient().db.users
    init_mongo_indexes(collection)
    return collection


@pytest.fixture
def user_store(users_collection):
    return UserDocumentService(users_collection)


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    return TokenIssuer("test-secret")


@pytest.fixture
def uploader():
    return StubUploader()


@pytest.fixture
def user_service(user_store, hasher, token_issuer, uploader):
    return UserService(user_store, hasher, token_issuer, uploader)


@pytest.fixture
def ada() -> RegisterRequest:
    return RegisterRequest(
        fullname="Ada",
        email="ada@example.com",
        phoneNumber="555-0100",
        password="pw123",
        role="seeker",
    )


@pytest.fixture
def client(user_service, token_issuer):
    """Test client wired to the in-memory service"""
    from jobportal.api.deps import get_token_issuer, get_user_service
    from jobportal.main import app

    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    yield TestClient(app)
    app.dependency_overrides.clear()
