"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "jobportal"
    users_collection: str = "users"

    # JWT session token (SECRET_KEY in the environment)
    secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"

    # Password hashing cost
    bcrypt_rounds: int = 12

    # Session cookie
    cookie_secure: bool = True

    # Cloudinary media uploads (left empty = uploads disabled)
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    profile_photo_folder: str = "profile_photos"
    resume_folder: str = "resumes"
    max_upload_mb: int = 5

    # App
    cors_origins: List[str] = ["http://localhost:5173"]
    log_level: str = "INFO"
    debug: bool = False

    @property
    def cloudinary_configured(self) -> bool:
        return bool(
            self.cloudinary_cloud_name
            and self.cloudinary_api_key
            and self.cloudinary_api_secret
        )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
