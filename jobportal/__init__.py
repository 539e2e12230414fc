"""
Job Portal backend
User accounts for recruiters and job seekers.

Architecture:
- MongoDB: user documents with an embedded profile
- Cloudinary: profile photos and resumes
- JWT in an http-only cookie for sessions
"""

__version__ = "1.0.0"
