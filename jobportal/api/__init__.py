"""
API module - FastAPI routers, request parsing and dependencies.

Usage:
    from jobportal.api import api_router
    app.include_router(api_router, prefix="/api/v1")
"""

from jobportal.api.routes import api_router

__all__ = ["api_router"]
