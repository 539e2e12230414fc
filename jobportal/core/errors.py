"""
Error taxonomy for the auth & profile flow.

Each error carries the HTTP status it maps to; the exception handlers in
jobportal.main render them as {"success": false, "message": ...}.
"""

from typing import Any, Dict, List, Optional


class PortalError(Exception):
    """Base class for errors reported to the caller with a specific message."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(PortalError):
    """Missing or malformed input."""
    default_message = "Please fill all required fields."


class ConflictError(PortalError):
    """Duplicate unique key (email)."""
    default_message = "User already exists with this email."


class AuthenticationError(PortalError):
    """Bad credentials (400) or missing session (401)."""
    default_message = "Incorrect email or password."


class AuthorizationError(PortalError):
    default_message = "Account doesn't exist with the selected role."


class NotFoundError(PortalError):
    status_code = 404
    default_message = "User not found"


class InternalError(PortalError):
    status_code = 500
    default_message = "Internal server error."


class UploadError(PortalError):
    """
    Remote media upload failure.

    Recoverable: returned inside an UploadOutcome rather than raised, so the
    caller decides whether the surrounding operation continues.
    """
    status_code = 502
    default_message = "Media upload failed"


MISSING_FIELDS = "Please fill all required fields."
INVALID_BODY = "Invalid request body."


def validation_message(errors: List[Dict[str, Any]]) -> str:
    """Caller-facing message for pydantic/FastAPI validation errors."""
    if not errors:
        return MISSING_FIELDS
    for error in errors:
        if error.get("type") in ("missing", "string_too_short"):
            return MISSING_FIELDS
    loc = errors[0].get("loc") or ()
    field = loc[-1] if loc else None
    # Whole-body errors (unparseable JSON, wrong body type) carry no field name
    if not isinstance(field, str) or field == "body":
        return INVALID_BODY
    return f"Invalid {field}."
