"""
File Upload Utility - read optional multipart uploads.

Max file size comes from settings (5MB by default).
"""

from typing import NamedTuple, Optional
from fastapi import UploadFile

from jobportal.core.errors import ValidationError


class UploadedFile(NamedTuple):
    filename: str
    content: bytes


def read_upload(file: Optional[UploadFile], max_bytes: int) -> Optional[UploadedFile]:
    """
    Read an optional uploaded file into memory.

    Returns None when no file (or an empty one) was sent.

    Raises:
        ValidationError (413) when the file exceeds max_bytes
    """
    if file is None or not file.filename:
        return None

    # Read one byte past the limit so oversize files are detected without
    # pulling the whole body into memory.
    content = file.file.read(max_bytes + 1)
    if len(content) > max_bytes:
        max_mb = max_bytes // (1024 * 1024)
        raise ValidationError(f"File too large. Maximum size: {max_mb}MB", status_code=413)
    if not content:
        return None

    return UploadedFile(file.filename, content)
