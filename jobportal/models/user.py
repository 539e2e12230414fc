"""
User document model.

Shape of a document in the users collection:
{
    "_id": ObjectId,
    "fullname": "Ada Lovelace",
    "email": "ada@example.com",
    "phoneNumber": "555-0100",
    "password": "<bcrypt hash>",
    "role": "seeker",
    "profile": {
        "bio": None,
        "skills": ["python", "sql"],
        "resume": None,
        "resumeOriginalName": None,
        "profilePhoto": "https://res.cloudinary.com/..."
    },
    "createdAt": datetime,
    "updatedAt": datetime
}
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

PROFILE_FIELDS = ("bio", "skills", "resume", "resumeOriginalName", "profilePhoto")


def parse_skills(raw: Optional[str]) -> Optional[List[str]]:
    """
    Split a comma-separated skills string into an ordered list.

    Items are stripped and empty items dropped, so "go,rust, c++" gives
    ["go", "rust", "c++"]. Returns None when nothing usable is left, which
    means "leave the stored skills alone".
    """
    if not raw:
        return None
    skills = [item.strip() for item in raw.split(",")]
    skills = [item for item in skills if item]
    return skills or None


def new_user_document(
    fullname: str,
    email: str,
    phone_number: str,
    password_hash: str,
    role: str,
    profile_photo: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a fresh user document ready for insert_one."""
    now = datetime.now(timezone.utc)
    return {
        "fullname": fullname,
        "email": email,
        "phoneNumber": phone_number,
        "password": password_hash,
        "role": role,
        "profile": {
            "bio": None,
            "skills": [],
            "resume": None,
            "resumeOriginalName": None,
            "profilePhoto": profile_photo,
        },
        "createdAt": now,
        "updatedAt": now,
    }


class UserPatch(BaseModel):
    """
    Partial update of a user document. Unset (None) fields are left alone.

    password holds the already-hashed value.
    """
    fullname: Optional[str] = None
    email: Optional[str] = None
    phoneNumber: Optional[str] = None
    password: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    resume: Optional[str] = None
    resumeOriginalName: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    def to_update(self) -> Dict[str, Any]:
        """Render as a single $set update; profile fields use dotted keys."""
        fields = {}
        for name, value in self.model_dump(exclude_none=True).items():
            key = f"profile.{name}" if name in PROFILE_FIELDS else name
            fields[key] = value
        fields["updatedAt"] = datetime.now(timezone.utc)
        return {"$set": fields}
