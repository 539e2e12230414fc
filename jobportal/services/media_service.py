"""
Media Upload Service - Cloudinary uploads for profile photos and resumes.

Uploads never raise into the caller: every call returns an UploadOutcome
holding either the secure URL or the UploadError, and the caller decides
whether to continue without the file. Failed uploads are not retried.
"""

import logging
from typing import NamedTuple, Optional

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from jobportal.core.errors import UploadError
from jobportal.utils.datauri import DataUri

logger = logging.getLogger(__name__)


class UploadOutcome(NamedTuple):
    secure_url: Optional[str] = None
    error: Optional[UploadError] = None

    @property
    def ok(self) -> bool:
        return self.secure_url is not None


class MediaUploader:
    """
    Cloudinary client bound to one set of credentials.

    Credentials are passed on each call instead of through cloudinary.config(),
    so the SDK's process-global configuration is never touched.
    """

    def __init__(self, cloud_name: str = "", api_key: str = "", api_secret: str = ""):
        self._credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
        }

    @property
    def configured(self) -> bool:
        return all(self._credentials.values())

    def upload(self, data_uri: DataUri, folder: str) -> UploadOutcome:
        """Upload an encoded file into folder and return its secure URL."""
        if not self.configured:
            return UploadOutcome(error=UploadError("Media uploads are not configured"))

        try:
            response = cloudinary.uploader.upload(
                data_uri.content,
                folder=folder,
                resource_type="auto",
                secure=True,
                **self._credentials,
            )
        except (CloudinaryError, OSError) as e:
            logger.warning("Upload to folder %s failed: %s", folder, e)
            return UploadOutcome(error=UploadError(f"Media upload failed: {e}"))

        secure_url = response.get("secure_url")
        if not secure_url:
            logger.warning("Upload to folder %s returned no secure_url", folder)
            return UploadOutcome(error=UploadError("Media upload returned no URL"))

        return UploadOutcome(secure_url=secure_url)
