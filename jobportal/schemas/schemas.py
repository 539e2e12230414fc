"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names follow the JSON contract the frontend uses (camelCase, "_id").
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, List, Any, Dict
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    seeker = "seeker"
    recruiter = "recruiter"


# ============================================================
# REQUEST SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    fullname: str = Field(..., min_length=1)
    email: EmailStr
    phoneNumber: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    role: UserRole

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: UserRole

class ProfileUpdateRequest(BaseModel):
    fullname: Optional[str] = None
    email: Optional[EmailStr] = None
    phoneNumber: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[str] = Field(None, description="Comma-separated skills")
    password: Optional[str] = None


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class ProfileView(BaseModel):
    bio: Optional[str] = None
    skills: List[str] = []
    resume: Optional[str] = None
    resumeOriginalName: Optional[str] = None
    profilePhoto: Optional[str] = None

class SafeUser(BaseModel):
    """User as returned to clients; the password hash is never part of it."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    fullname: str
    email: str
    phoneNumber: str
    role: UserRole
    profile: ProfileView = ProfileView()

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "SafeUser":
        return cls(
            id=str(doc["_id"]),
            fullname=doc["fullname"],
            email=doc["email"],
            phoneNumber=doc["phoneNumber"],
            role=doc["role"],
            profile=ProfileView(**(doc.get("profile") or {})),
        )

class UserResponse(BaseModel):
    message: str
    success: bool = True
    user: SafeUser


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class ErrorResponse(BaseModel):
    message: str
    success: bool = False
