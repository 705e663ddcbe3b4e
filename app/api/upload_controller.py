"""
app/api/upload_controller.py

Handles incoming requests to POST /upload.

This layer is responsible only for HTTP concerns:
  - Resolving the client id used for rate limiting, and having the
    service check configuration and quota before the body is read.
  - Parsing the multipart form and pulling out the applicant's names,
    the attached file and the hidden honeypot field.
  - Delegating validation and storage to ApplicationService.
  - Translating service-level errors into appropriate HTTP responses.

Responses:
  200  The application was stored.  Body: { "success": true, "path": "..." }
  400  A name or the file failed validation, or the body was not a
       readable multipart form.
  429  The client has used up its submissions for the current hour.
  500  The server is not configured, the storage upload failed, or an
       unexpected error occurred.  Details are logged, never returned.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import FormData, UploadFile as StarletteUploadFile

from app.api.dependencies import get_application_service, resolve_client_id
from app.core.constants import FIELD_FILE, FIELD_FIRST_NAME, FIELD_HONEYPOT, FIELD_LAST_NAME
from app.core.exceptions import (
    ConfigurationError,
    RateLimitExceededError,
    StorageError,
    SubmissionValidationError,
)
from app.core.logger import get_logger
from app.models.application_models import ErrorResponse, SubmissionResponse
from app.services.application_service import ApplicationService

logger = get_logger(__name__)

router = APIRouter(tags=["Applications"])

MSG_BAD_FORM = "Invalid multipart/form-data payload."
MSG_UPLOAD_FAILED = "Upload failed. Please try again."
MSG_UNEXPECTED = "An unexpected error occurred. Please try again."

# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response: { "error": "..." }"""
    return JSONResponse(status_code=status, content={"error": message})


def _text_field(form: FormData, name: str) -> Optional[str]:
    """Return a text form value, or None if missing or sent as a file."""
    value = form.get(name)
    return value if isinstance(value, str) else None


def _file_field(form: FormData, name: str) -> Optional[StarletteUploadFile]:
    """Return a file form value, or None if missing or sent as plain text."""
    value = form.get(name)
    return value if isinstance(value, StarletteUploadFile) else None


# ── Endpoint ───────────────────────────────────────────────────────────────────

@router.post(
    "/upload",
    response_model=SubmissionResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Submit a job application (one PDF)",
)
async def upload_application(
    request: Request,
    service: ApplicationService = Depends(get_application_service),
) -> JSONResponse:
    """
    Multipart fields:
      • firstName — required, at most 100 characters
      • lastName  — required, at most 100 characters
      • file      — required, application/pdf, at most 10 MB
    """
    client_id = resolve_client_id(request)
    form: Optional[FormData] = None

    try:
        # ── 1. Configuration and rate limit, before the body is read ───────────
        service.check_admission(client_id)

        # ── 2. Parse multipart form ────────────────────────────────────────────
        try:
            form = await request.form()
        except Exception as exc:
            raise SubmissionValidationError(MSG_BAD_FORM) from exc

        # ── 3. Validate and store ──────────────────────────────────────────────
        result = await service.submit(
            client_id=client_id,
            first_name=_text_field(form, FIELD_FIRST_NAME),
            last_name=_text_field(form, FIELD_LAST_NAME),
            upload=_file_field(form, FIELD_FILE),
            honeypot=_text_field(form, FIELD_HONEYPOT),
        )

    except ConfigurationError as exc:
        return _err(str(exc), status=500)

    except RateLimitExceededError as exc:
        return _err(str(exc), status=429)

    except SubmissionValidationError as exc:
        logger.info("Submission from '%s' rejected: %s", client_id, exc)
        return _err(str(exc))

    except StorageError as exc:
        logger.error("Supabase upload error: %s", exc, exc_info=exc)
        return _err(MSG_UPLOAD_FAILED, status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error during upload: %s", exc)
        return _err(MSG_UNEXPECTED, status=500)

    finally:
        if form is not None:
            await form.close()

    return JSONResponse(
        status_code=200,
        content=result.model_dump(exclude_none=True),
    )
