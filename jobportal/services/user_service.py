"""
User Service - register, login, logout and profile updates.

Flow:
    register  -> check email -> upload photo (optional) -> hash -> insert
    login     -> find by email -> verify password -> check role -> issue token
    update    -> find by id -> build patch -> upload resume (optional) -> apply

Media uploads go through MediaUploader, which reports failure as a value;
both register and update continue without the file when an upload fails.
"""

import logging
from typing import NamedTuple, Optional

from jobportal.core.auth import PasswordHasher, TokenIssuer
from jobportal.core.errors import (
    AuthenticationError, AuthorizationError, ConflictError, NotFoundError
)
from jobportal.models.user import UserPatch, new_user_document, parse_skills
from jobportal.schemas.schemas import LoginRequest, ProfileUpdateRequest, RegisterRequest, SafeUser
from jobportal.services.media_service import MediaUploader, UploadOutcome
from jobportal.services.mongo_service import UserDocumentService
from jobportal.utils.datauri import get_data_uri
from jobportal.utils.file_upload import UploadedFile

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Incorrect email or password."
ROLE_MISMATCH = "Account doesn't exist with the selected role."


class LoginResult(NamedTuple):
    token: str
    user: SafeUser
    message: str


class UserService:
    def __init__(
        self,
        users: UserDocumentService,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        uploader: MediaUploader,
        photo_folder: str = "profile_photos",
        resume_folder: str = "resumes",
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens
        self.uploader = uploader
        self.photo_folder = photo_folder
        self.resume_folder = resume_folder

    def _upload(self, upload: UploadedFile, folder: str) -> UploadOutcome:
        data_uri = get_data_uri(upload.content, upload.filename)
        if data_uri is None:
            return UploadOutcome()
        outcome = self.uploader.upload(data_uri, folder)
        if not outcome.ok and outcome.error is not None:
            logger.warning("Continuing without %s: %s", upload.filename, outcome.error.message)
        return outcome

    def register(self, data: RegisterRequest, upload: Optional[UploadedFile] = None) -> str:
        """
        Create a new account. No session is issued; the user logs in separately.

        Raises:
            ConflictError if the email is already registered
        """
        # Check before uploading so a doomed registration costs no upload.
        if self.users.find_by_email(data.email):
            raise ConflictError("User already exists with this email.")

        photo_url = None
        if upload is not None:
            photo_url = self._upload(upload, self.photo_folder).secure_url

        user_id = self.users.insert(new_user_document(
            fullname=data.fullname,
            email=data.email,
            phone_number=data.phoneNumber,
            password_hash=self.hasher.hash(data.password),
            role=data.role.value,
            profile_photo=photo_url,
        ))
        logger.info("Registered user %s as %s", user_id, data.role.value)
        return "Account created successfully."

    def login(self, data: LoginRequest) -> LoginResult:
        """
        Verify credentials and issue a session token.

        Unknown email and wrong password raise the same AuthenticationError.
        Role mismatch is checked only after the password verifies.
        """
        user = self.users.find_by_email(data.email)
        if user is None:
            self.hasher.dummy_verify()
            logger.info("Login failed for %s", data.email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not self.hasher.verify(data.password, user["password"]):
            logger.info("Login failed for %s", data.email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        if data.role.value != user["role"]:
            raise AuthorizationError(ROLE_MISMATCH)

        token = self.tokens.issue(str(user["_id"]))
        return LoginResult(
            token=token,
            user=SafeUser.from_document(user),
            message=f"Welcome back {user['fullname']}!",
        )

    def logout(self) -> str:
        return "Logged out successfully."

    def update_profile(
        self,
        user_id: Optional[str],
        data: ProfileUpdateRequest,
        upload: Optional[UploadedFile] = None,
    ) -> SafeUser:
        """
        Apply the supplied fields to the user's document.

        Absent or empty fields leave stored values untouched; role is never
        changed here. A failed resume upload does not stop the other fields.
        """
        if not user_id:
            raise AuthenticationError("Unauthorized", status_code=401)

        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        patch = UserPatch(
            fullname=data.fullname or None,
            email=data.email or None,
            phoneNumber=data.phoneNumber or None,
            bio=data.bio or None,
            skills=parse_skills(data.skills),
            password=self.hasher.hash(data.password) if data.password else None,
        )

        if upload is not None:
            outcome = self._upload(upload, self.resume_folder)
            if outcome.ok:
                patch.resume = outcome.secure_url
                patch.resumeOriginalName = upload.filename

        if not patch.is_empty():
            user = self.users.apply_patch(user_id, patch)
            if user is None:
                raise NotFoundError("User not found")
            logger.info("Updated profile of user %s", user_id)

        return SafeUser.from_document(user)
