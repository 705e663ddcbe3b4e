"""
app/storage/supabase_store.py

Supabase Storage implementation of the ObjectStore interface.

All provider-specific details are fully contained here — the rest of the
application never imports from ``supabase`` directly.
"""

from __future__ import annotations

from typing import Any, Optional

from supabase import create_client

from app.core.config import settings
from app.core.exceptions import StorageError
from app.core.logger import get_logger
from app.storage.base import ObjectStore

logger = get_logger(__name__)


class SupabaseObjectStore(ObjectStore):
    """
    ObjectStore backed by one Supabase Storage bucket.

    Authenticates with the service-role key, so the bucket itself can stay
    private. The client is created once on construction and reused.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        service_key: Optional[str] = None,
        bucket: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        """
        Args:
            url         : Supabase project URL. Defaults to ``settings.supabase_url``.
            service_key : Service-role key. Defaults to ``settings.supabase_service_role_key``.
            bucket      : Target bucket. Defaults to ``settings.storage_bucket``.
            client      : Pre-built Supabase client; skips ``create_client`` when given.
        """
        self._bucket = bucket or settings.storage_bucket

        if client is not None:
            self._client = client
            return

        url = url or settings.supabase_url
        service_key = service_key or settings.supabase_service_role_key
        try:
            self._client = create_client(url, service_key)
        except Exception as exc:
            raise StorageError(f"Failed to initialise Supabase client: {exc}") from exc

        logger.info("SupabaseObjectStore ready — bucket=%s", self._bucket)

    @property
    def bucket(self) -> str:
        return self._bucket

    # ── ObjectStore interface ──────────────────────────────────────────────────

    def upload(self, path: str, data: bytes, content_type: str) -> None:
        try:
            self._client.storage.from_(self._bucket).upload(
                path=path,
                file=data,
                file_options={"content-type": content_type, "upsert": "false"},
            )
        except Exception as exc:
            raise StorageError(
                f"Upload of '{path}' to bucket '{self._bucket}' failed: {exc}"
            ) from exc

        logger.info("Stored '%s' in bucket '%s' (%d bytes).", path, self._bucket, len(data))
