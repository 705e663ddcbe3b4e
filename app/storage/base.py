"""
app/storage/base.py

Abstract interface for the object storage layer.

Services depend only on this interface, never on a concrete provider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ObjectStore(ABC):
    """
    Contract every object-storage backend must fulfil.

    Concrete implementations (e.g. SupabaseObjectStore) wrap a specific
    provider and translate its API to this interface.
    """

    @abstractmethod
    def upload(self, path: str, data: bytes, content_type: str) -> None:
        """
        Write ``data`` as a new object at ``path``.

        The write never replaces an existing object: if ``path`` is already
        taken the call fails.

        Args:
            path         : Object key inside the backend's bucket.
            data         : Complete object content.
            content_type : MIME type stored with the object.

        Raises:
            StorageError: If the backend rejects or fails the write.
        """
