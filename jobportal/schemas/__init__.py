"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: the stored user document and its partial-update type
- Schemas: API contract (what client sends/receives)
"""

from jobportal.schemas.schemas import (
    UserRole, RegisterRequest, LoginRequest, ProfileUpdateRequest,
    ProfileView, SafeUser, UserResponse, MessageResponse, ErrorResponse
)

__all__ = [
    "UserRole", "RegisterRequest", "LoginRequest", "ProfileUpdateRequest",
    "ProfileView", "SafeUser", "UserResponse", "MessageResponse", "ErrorResponse"
]
