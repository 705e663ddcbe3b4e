"""
app/api/dependencies.py

FastAPI dependencies shared by the controllers.
"""

from fastapi import Request

from app.core.constants import UNKNOWN_CLIENT_ID
from app.services.application_service import ApplicationService


def get_application_service(request: Request) -> ApplicationService:
    """Return the service built by the application lifespan."""
    return request.app.state.application_service


def resolve_client_id(request: Request) -> str:
    """
    Identify the caller for rate limiting.

    Order: left-most ``X-Forwarded-For`` entry, then ``X-Real-IP``, then the
    shared ``"unknown"`` bucket. The socket peer address is not used; behind
    the hosting proxy it is always the proxy itself.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = (request.headers.get("x-real-ip") or "").strip()
    if real_ip:
        return real_ip

    return UNKNOWN_CLIENT_ID
