"""
Data URI encoding for uploaded files.

The media CDN accepts a file as a data URI string:
    data:<mime type>;base64,<payload>
"""

import base64
import mimetypes
import os
from typing import NamedTuple, Optional

DEFAULT_MIMETYPE = "application/octet-stream"


class DataUri(NamedTuple):
    mimetype: str
    base64: str
    content: str


def get_mimetype(filename: str) -> str:
    """MIME type derived from the file extension."""
    ext = os.path.splitext(filename or "")[1].lower()
    if not ext:
        return DEFAULT_MIMETYPE
    return mimetypes.guess_type("file" + ext)[0] or DEFAULT_MIMETYPE


def get_data_uri(content: bytes, filename: str) -> Optional[DataUri]:
    """
    Encode file bytes as a data URI.

    Returns None when there is nothing to encode.
    """
    if not content:
        return None
    mimetype = get_mimetype(filename)
    payload = base64.b64encode(content).decode("ascii")
    return DataUri(mimetype, payload, f"data:{mimetype};base64,{payload}")
