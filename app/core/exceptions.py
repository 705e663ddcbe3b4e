"""
app/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals.
The message of every exception below is safe to show to the submitter;
provider diagnostics travel in ``__cause__`` and only reach the logs.
"""


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Server-side exceptions ─────────────────────────────────────────────────────

class ConfigurationError(AppBaseException):
    """Raised when the storage endpoint or service credential is not configured."""


class StorageError(AppBaseException):
    """Raised when the object store rejects or fails an upload."""


# ── Submitter-facing exceptions ────────────────────────────────────────────────

class RateLimitExceededError(AppBaseException):
    """Raised when a client has used up its submissions for the current window."""


class SubmissionValidationError(AppBaseException):
    """Raised when the names or the attached file fail validation."""
