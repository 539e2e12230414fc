"""
Job Portal - Main Application

FastAPI backend with:
- MongoDB for user documents
- Cloudinary for profile photos and resumes
- JWT session cookie authentication

Run: uvicorn jobportal.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from jobportal.api import api_router
from jobportal.core.config import get_settings
from jobportal.core.errors import InternalError, PortalError, validation_message
from jobportal.core.logging_config import setup_logging
from jobportal.db.mongodb import get_collection, init_mongo_indexes, test_mongo_connection

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Job Portal",
    description="""
    Accounts for a job portal.

    ## Features
    - **Register**: recruiters and job seekers, optional profile photo
    - **Login / Logout**: JWT session in an http-only cookie
    - **Profile**: partial updates, skills, resume upload
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (credentials are needed for the session cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api/v1")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(400, validation_message(exc.errors()))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(InternalError.status_code, InternalError.default_message)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Ensure the unique email index exists."""
    try:
        init_mongo_indexes(get_collection("users"))
    except PyMongoError as e:
        logger.error("MongoDB index initialization failed: %s", e)


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
