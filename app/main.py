"""
app/main.py

FastAPI application entry point.

Responsibilities:
  - Create the FastAPI app with metadata from config
  - Build the ApplicationService (and its rate limiter) for the lifetime
    of the app, and expose it on ``app.state``
  - Register all API routers
  - Add a global exception handler for uncaught AppBaseException
  - Expose a /health endpoint for liveness probes
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.upload_controller import router as upload_router
from app.core.config import settings
from app.core.exceptions import AppBaseException
from app.core.logger import get_logger
from app.services.application_service import create_application_service

logger = get_logger(__name__)

# ── Lifespan ───────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    app.state.application_service = create_application_service(settings)
    if not settings.storage_configured:
        logger.warning("SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY not set — uploads will fail.")
    logger.info(
        "%s %s started — rate limit %d per %ds.",
        settings.app_name,
        settings.app_version,
        settings.rate_limit_max_requests,
        settings.rate_limit_window_seconds,
    )
    yield
    logger.info("%s shutting down.", settings.app_name)


# ── App instance ───────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Receives job applications (name plus one PDF), rate-limits them per "
        "client and stores the PDF in object storage."
    ),
    lifespan=lifespan,
)

# ── Routers ────────────────────────────────────────────────────────────────────

app.include_router(upload_router)

# ── Global exception handler ───────────────────────────────────────────────────

@app.exception_handler(AppBaseException)
async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
    """
    Safety-net for any AppBaseException that escapes controller-level handling.
    Returns the error shape { "error": "..." } without exception details.
    """
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred. Please try again."},
    )


# ── Health endpoint ────────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"], summary="Liveness probe")
async def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {"status": "ok", "version": settings.app_version}
