"""
FastAPI dependencies - service handles and the session cookie.

Handles are constructed once from Settings (lru_cache) and injected with
Depends; tests swap them through app.dependency_overrides.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Cookie, Depends

from jobportal.core.auth import PasswordHasher, TokenIssuer
from jobportal.core.config import get_settings
from jobportal.db.mongodb import get_collection
from jobportal.services.media_service import MediaUploader
from jobportal.services.mongo_service import UserDocumentService
from jobportal.services.user_service import UserService


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(settings.secret_key, algorithm=settings.jwt_algorithm)


@lru_cache()
def get_media_uploader() -> MediaUploader:
    settings = get_settings()
    return MediaUploader(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
    )


@lru_cache()
def get_user_service() -> UserService:
    settings = get_settings()
    return UserService(
        users=UserDocumentService(get_collection("users")),
        hasher=get_password_hasher(),
        tokens=get_token_issuer(),
        uploader=get_media_uploader(),
        photo_folder=settings.profile_photo_folder,
        resume_folder=settings.resume_folder,
    )


def get_current_user_id(
    token: Optional[str] = Cookie(None),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> Optional[str]:
    """
    User id from the session cookie, or None when the cookie is missing,
    tampered with or expired. Routes that require a user reject None.
    """
    if not token:
        return None
    return tokens.decode(token)
