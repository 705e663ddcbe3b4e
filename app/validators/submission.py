"""
app/validators/submission.py

Validation rules for one application submission.

Each function raises SubmissionValidationError with a message that is
returned to the submitter verbatim, so messages must not leak internals.
The service calls them in a fixed order: names, file declaration, then
file content once the bytes have been read.
"""

from __future__ import annotations

from typing import Optional, Tuple

from fastapi import UploadFile

from app.core.constants import ALLOWED_PDF_CONTENT_TYPE, MAX_FILE_SIZE, MAX_NAME_LENGTH
from app.core.exceptions import SubmissionValidationError
from app.validators.pdf_signature import has_pdf_signature

MSG_NAMES_REQUIRED = "First name and last name are required."
MSG_NAME_TOO_LONG = (
    f"First name and last name must not exceed {MAX_NAME_LENGTH} characters each."
)
MSG_NO_FILE = "No file provided."
MSG_NOT_PDF = "Only PDF files are accepted."
MSG_TOO_LARGE = "File size must not exceed 10 MB."
MSG_BAD_SIGNATURE = "Invalid file. Only PDF files are accepted."


def validate_names(
    first_name: Optional[str],
    last_name: Optional[str],
) -> Tuple[str, str]:
    """
    Trim both names and check presence and length.

    Returns:
        The trimmed ``(first_name, last_name)`` pair.

    Raises:
        SubmissionValidationError: If either name is blank or too long.
    """
    first = (first_name or "").strip()
    last = (last_name or "").strip()

    if not first or not last:
        raise SubmissionValidationError(MSG_NAMES_REQUIRED)
    if len(first) > MAX_NAME_LENGTH or len(last) > MAX_NAME_LENGTH:
        raise SubmissionValidationError(MSG_NAME_TOO_LONG)

    return first, last


def validate_file_declaration(upload: Optional[UploadFile]) -> None:
    """
    Check what the client says about the file, before reading it.

    ``upload`` is ``None`` when the form had no file part. The declared
    size is only checked when the server knows it; ``validate_file_content``
    re-checks the real length.

    Raises:
        SubmissionValidationError: Missing file, wrong content type or oversize.
    """
    if upload is None:
        raise SubmissionValidationError(MSG_NO_FILE)
    if upload.content_type != ALLOWED_PDF_CONTENT_TYPE:
        raise SubmissionValidationError(MSG_NOT_PDF)

    if upload.size is not None and upload.size > MAX_FILE_SIZE:
        raise SubmissionValidationError(MSG_TOO_LARGE)


def validate_file_content(data: bytes) -> None:
    """
    Check the actual bytes: size cap, then the ``%PDF-`` signature.

    Raises:
        SubmissionValidationError: If the body is too large or is not a PDF.
    """
    if len(data) > MAX_FILE_SIZE:
        raise SubmissionValidationError(MSG_TOO_LARGE)
    if not has_pdf_signature(data):
        raise SubmissionValidationError(MSG_BAD_SIGNATURE)
