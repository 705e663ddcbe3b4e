"""app/storage/__init__.py — public API of the storage package."""

from app.storage.base import ObjectStore
from app.storage.paths import build_object_path, sanitize_name
from app.storage.supabase_store import SupabaseObjectStore

__all__ = [
    "ObjectStore",
    "SupabaseObjectStore",
    "build_object_path",
    "sanitize_name",
]
