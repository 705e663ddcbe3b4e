"""
app/core/constants.py

Application-wide fixed constants.

These are business rules that are part of the system's contract and are
NOT configurable via environment variables.
"""

# ── Accepted uploads ───────────────────────────────────────────────────────────

#: The only MIME type accepted for an application document.
ALLOWED_PDF_CONTENT_TYPE: str = "application/pdf"

#: Leading bytes every genuine PDF starts with.
PDF_MAGIC_BYTES: bytes = b"%PDF-"

#: Largest accepted upload, in bytes (10 MiB).
MAX_FILE_SIZE: int = 10 * 1024 * 1024

#: Longest accepted first or last name, in characters (after trimming).
MAX_NAME_LENGTH: int = 100

# ── Form fields ────────────────────────────────────────────────────────────────

FIELD_FILE: str = "file"
FIELD_FIRST_NAME: str = "firstName"
FIELD_LAST_NAME: str = "lastName"

#: Hidden from humans by the form; only bots fill it in.
FIELD_HONEYPOT: str = "website"

# ── Storage layout ─────────────────────────────────────────────────────────────

#: Folder inside the bucket that receives every application.
STORAGE_PREFIX: str = "applications/"

#: Used when a name contains no whitelisted characters at all.
FALLBACK_FIRST_NAME: str = "First"
FALLBACK_LAST_NAME: str = "Last"

# ── Client identification ──────────────────────────────────────────────────────

#: Shared rate-limit bucket for requests without proxy address headers.
UNKNOWN_CLIENT_ID: str = "unknown"
