"""app/validators/__init__.py — public API of the validators package."""

from app.validators.pdf_signature import has_pdf_signature
from app.validators.submission import (
    validate_file_content,
    validate_file_declaration,
    validate_names,
)

__all__ = [
    "has_pdf_signature",
    "validate_names",
    "validate_file_declaration",
    "validate_file_content",
]
