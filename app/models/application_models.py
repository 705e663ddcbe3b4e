"""
app/models/application_models.py

Pydantic DTOs for the application upload flow.
The request has no DTO — the controller reads the multipart form
directly; only the response shapes are defined here.
"""

from typing import Optional

from pydantic import BaseModel


class SubmissionResponse(BaseModel):
    """
    Successful response for POST /upload.

        {
            "success": true,
            "path": "applications/2026-01-15T10-30-00-000Z_Marie Curie.pdf"
        }

    ``path`` is omitted when nothing was stored (honeypot submissions).
    """

    success: bool = True
    path: Optional[str] = None


class ErrorResponse(BaseModel):
    """Every non-2xx response body: { "error": "..." }"""

    error: str
