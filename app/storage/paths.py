"""
app/storage/paths.py

Derives the object key an application is stored under:

    applications/2026-01-15T10-30-00-000Z_Marie Curie.pdf

The timestamp is UTC with millisecond precision; ':' and '.' are replaced
with '-' so the key stays readable in the storage console.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

from app.core.constants import (
    FALLBACK_FIRST_NAME,
    FALLBACK_LAST_NAME,
    STORAGE_PREFIX,
)

# Anything that is not a letter, digit, whitespace, hyphen or one of the
# accepted Latin diacritics is dropped from a name.
_DISALLOWED_NAME_CHARS = re.compile(
    r"[^a-zA-Z0-9\s\-äöüÄÖÜàáâãäåèéêëìíîïòóôõöùúûüýÿñç]"
)


def sanitize_name(value: str, fallback: str) -> str:
    """
    Strip every character outside the name whitelist, then trim.

    Returns ``fallback`` when nothing is left.

    >>> sanitize_name("O'Brien", "Last")
    'OBrien'
    >>> sanitize_name("李", "First")
    'First'
    """
    cleaned = _DISALLOWED_NAME_CHARS.sub("", value).strip()
    return cleaned or fallback


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with milliseconds and 'Z', with ':' and '.' as '-'."""
    utc = moment.astimezone(timezone.utc)
    iso = utc.strftime("%Y-%m-%dT%H:%M:%S") + f".{utc.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def build_object_path(
    first_name: str,
    last_name: str,
    now: Optional[datetime] = None,
) -> str:
    """
    Build the storage key for one application.

    Args:
        first_name : Applicant's first name, already trimmed and validated.
        last_name  : Applicant's last name, already trimmed and validated.
        now        : Submission time; defaults to the current UTC time.

    Returns:
        ``applications/<timestamp>_<First> <Last>.pdf``
    """
    moment = now or datetime.now(timezone.utc)
    filename = (
        f"{sanitize_name(first_name, FALLBACK_FIRST_NAME)} "
        f"{sanitize_name(last_name, FALLBACK_LAST_NAME)}.pdf"
    )
    return f"{STORAGE_PREFIX}{format_timestamp(moment)}_{filename}"
