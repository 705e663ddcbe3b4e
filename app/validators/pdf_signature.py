"""
app/validators/pdf_signature.py

Magic-byte check for PDF content.

The declared content type comes from the client and proves nothing; the
first bytes of the body do.
"""

from app.core.constants import PDF_MAGIC_BYTES


def has_pdf_signature(data: bytes) -> bool:
    """Return True when ``data`` starts with the ``%PDF-`` header."""
    return data[: len(PDF_MAGIC_BYTES)] == PDF_MAGIC_BYTES
