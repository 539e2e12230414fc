"""
Models module - the user document and its partial-update type.
"""

from jobportal.models.user import UserPatch, new_user_document, parse_skills

__all__ = ["UserPatch", "new_user_document", "parse_skills"]
