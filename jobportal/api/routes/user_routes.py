"""
User Routes

POST /user/register        - Register new user (multipart, optional photo)
POST /user/login           - Login, sets the session cookie (form or JSON)
GET|POST /user/logout      - Clear the session cookie
PUT|POST /user/profile/update - Update own profile (multipart, optional resume)
"""

from typing import Any, Dict, Iterable, Optional, Type

from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile
from pydantic import BaseModel, ValidationError as PydanticValidationError

from jobportal.api.deps import get_current_user_id, get_user_service
from jobportal.core.auth import SESSION_COOKIE_NAME, SESSION_TTL
from jobportal.core.config import Settings, get_settings
from jobportal.core.errors import INVALID_BODY, MISSING_FIELDS, ValidationError, validation_message
from jobportal.services.user_service import UserService
from jobportal.utils.file_upload import read_upload
from jobportal.schemas.schemas import (
    RegisterRequest, LoginRequest, ProfileUpdateRequest, MessageResponse, UserResponse
)

router = APIRouter(prefix="/user", tags=["Users"])


def build_request(model: Type[BaseModel], values: Dict[str, Any], required: Iterable[str] = ()):
    """Validate form values into a request schema, raising ValidationError."""
    if any(not values.get(name) for name in required):
        raise ValidationError(MISSING_FIELDS)
    try:
        return model(**{k: v for k, v in values.items() if v})
    except PydanticValidationError as e:
        raise ValidationError(validation_message(e.errors()))


def register_form(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phoneNumber: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
) -> RegisterRequest:
    values = {
        "fullname": fullname, "email": email, "phoneNumber": phoneNumber,
        "password": password, "role": role,
    }
    return build_request(RegisterRequest, values, required=values.keys())


def profile_update_form(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phoneNumber: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    skills: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
) -> ProfileUpdateRequest:
    return build_request(ProfileUpdateRequest, {
        "fullname": fullname, "email": email, "phoneNumber": phoneNumber,
        "bio": bio, "skills": skills, "password": password,
    })


async def login_request(request: Request) -> LoginRequest:
    """
    Login credentials from either a form or a JSON body.

    The web frontend posts JSON; plain HTML forms post urlencoded fields.
    """
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationError(INVALID_BODY)
        if not isinstance(payload, dict):
            raise ValidationError(INVALID_BODY)
    else:
        payload = await request.form()

    values = {name: payload.get(name) for name in ("email", "password", "role")}
    return build_request(LoginRequest, values, required=values.keys())


def set_session_cookie(response: Response, token: str, max_age: int, secure: bool) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=max_age,
        httponly=True,
        samesite="strict",
        secure=secure,
    )


@router.post("/register", response_model=MessageResponse, status_code=201)
def register(
    data: RegisterRequest = Depends(register_form),
    file: Optional[UploadFile] = File(None),
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new account, optionally with a profile photo.

    After registration, login to get the session cookie.
    """
    upload = read_upload(file, settings.max_upload_bytes)
    return MessageResponse(message=service.register(data, upload))


@router.post("/login", response_model=UserResponse)
def login(
    response: Response,
    data: LoginRequest = Depends(login_request),
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    """
    Login and receive the session cookie.

    The token travels only in an http-only, same-site strict cookie.
    """
    result = service.login(data)
    set_session_cookie(
        response, result.token,
        max_age=int(SESSION_TTL.total_seconds()),
        secure=settings.cookie_secure,
    )
    return UserResponse(message=result.message, user=result.user)


@router.api_route("/logout", methods=["GET", "POST"], response_model=MessageResponse)
def logout(
    response: Response,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    """Expire the session cookie immediately."""
    set_session_cookie(response, "", max_age=0, secure=settings.cookie_secure)
    return MessageResponse(message=service.logout())


@router.api_route("/profile/update", methods=["PUT", "POST"], response_model=UserResponse)
def update_profile(
    data: ProfileUpdateRequest = Depends(profile_update_form),
    file: Optional[UploadFile] = File(None),
    user_id: Optional[str] = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    """Update own profile. Only provided fields are updated."""
    upload = read_upload(file, settings.max_upload_bytes)
    user = service.update_profile(user_id, data, upload)
    return UserResponse(message="Profile updated successfully", user=user)
