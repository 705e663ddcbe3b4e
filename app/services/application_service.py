"""
app/services/application_service.py

Runs one job-application submission through the pipeline in two calls.
The controller reads the multipart body only between them:

    check_admission()
      └─ configuration check
           └─ RateLimiter.admit()

    submit()
      └─ honeypot check
           └─ validate names → file declaration → file content
                └─ build_object_path()
                     └─ ObjectStore.upload()

Every step short-circuits by raising a typed AppBaseException; the
controller turns those into HTTP responses. The limiter and the store are
constructor-injected so tests can swap them out; the application lifespan
builds the production instance via ``create_application_service``.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import UploadFile

from app.core.config import Settings, settings
from app.core.constants import ALLOWED_PDF_CONTENT_TYPE
from app.core.exceptions import ConfigurationError, RateLimitExceededError
from app.core.logger import get_logger
from app.models.application_models import SubmissionResponse
from app.rate_limiter.base import RateLimiter
from app.rate_limiter.sliding_window import SlidingWindowRateLimiter
from app.storage.base import ObjectStore
from app.storage.paths import build_object_path
from app.storage.supabase_store import SupabaseObjectStore
from app.validators.submission import (
    validate_file_content,
    validate_file_declaration,
    validate_names,
)

logger = get_logger(__name__)

MSG_NOT_CONFIGURED = "Server configuration error. Please contact the administrator."
MSG_RATE_LIMITED = "Too many submissions. Please try again later."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ApplicationService:
    """
    Validates and stores job applications.

    Design choices:
    - **No retries**: a failed upload surfaces immediately as StorageError.
    - **Lazy store**: when no store is injected, the Supabase store is
      created on the first upload that passes validation, so a missing
      configuration never breaks application startup.
    """

    def __init__(
        self,
        rate_limiter: RateLimiter,
        store: Optional[ObjectStore] = None,
        config: Optional[Settings] = None,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._rate_limiter = rate_limiter
        self._store = store
        self._config = config or settings
        self._now = now

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    # ── Public API ─────────────────────────────────────────────────────────────

    def check_admission(self, client_id: str) -> None:
        """
        Run the steps that must pass before the request body is even read.

        Args:
            client_id: Rate-limit key for the caller.

        Raises:
            ConfigurationError:     Storage URL or key is not set.
            RateLimitExceededError: The client used up its quota.
        """
        # 1 — configuration, before the limiter counts anything
        if not self._config.storage_configured:
            logger.error("Supabase credentials not configured — rejecting upload.")
            raise ConfigurationError(MSG_NOT_CONFIGURED)

        # 2 — rate limit
        if not self._rate_limiter.admit(client_id):
            logger.warning("Rate limit exceeded for client '%s'.", client_id)
            raise RateLimitExceededError(MSG_RATE_LIMITED)

    async def submit(
        self,
        client_id: str,
        first_name: Optional[str],
        last_name: Optional[str],
        upload: Optional[UploadFile],
        honeypot: Optional[str] = None,
    ) -> SubmissionResponse:
        """
        Validate one admitted submission and store its PDF.

        Callers must have passed ``check_admission`` for ``client_id`` first.

        Args:
            client_id  : Rate-limit key for the caller, used for logging.
            first_name : Raw ``firstName`` form value (may be None).
            last_name  : Raw ``lastName`` form value (may be None).
            upload     : UploadFile from the ``file`` field, or None.
            honeypot   : Raw value of the hidden honeypot field, if sent.

        Returns:
            SubmissionResponse with the object path (no path for honeypot hits).

        Raises:
            SubmissionValidationError: A name or the file is invalid.
            StorageError:              The object store failed the upload.
        """
        # 3 — bots fill the hidden field; pretend it worked and store nothing
        if honeypot and honeypot.strip():
            logger.warning("Honeypot field filled by client '%s' — discarding.", client_id)
            return SubmissionResponse(success=True)

        # 4–8 — fields and file
        first, last = validate_names(first_name, last_name)
        validate_file_declaration(upload)
        data: bytes = await upload.read()
        validate_file_content(data)

        # 9 — derive the key and upload
        path = build_object_path(first, last, self._now())
        await asyncio.to_thread(
            self._get_store().upload, path, data, ALLOWED_PDF_CONTENT_TYPE
        )

        logger.info("Application stored at '%s' (%d bytes).", path, len(data))
        return SubmissionResponse(success=True, path=path)

    # ── Internals ──────────────────────────────────────────────────────────────

    def _get_store(self) -> ObjectStore:
        if self._store is None:
            self._store = SupabaseObjectStore(
                url=self._config.supabase_url,
                service_key=self._config.supabase_service_role_key,
                bucket=self._config.storage_bucket,
            )
        return self._store


def create_application_service(config: Optional[Settings] = None) -> ApplicationService:
    """Build the production service: in-process limiter, Supabase store."""
    config = config or settings
    limiter = SlidingWindowRateLimiter(
        max_requests=config.rate_limit_max_requests,
        window_seconds=config.rate_limit_window_seconds,
    )
    return ApplicationService(rate_limiter=limiter, config=config)
