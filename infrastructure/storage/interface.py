"""
Storage Interface
=================

Contract for object storage used by product media, banners, posters,
subcategory images and seller verification documents.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass
class StorageFile:
    """
    A stored object.

    Attributes:
        key: Object key inside the bucket (e.g. ``products/ab12cd.jpg``)
        url: Public URL of the object
        size: Size in bytes
        content_type: MIME type
        bucket: Bucket name, when the backend has one
    """

    key: str
    url: str
    size: int
    content_type: str
    bucket: Optional[str] = None


class StorageInterface(ABC):
    """
    Abstract object storage.

    Implementations:
        - S3StorageAdapter: AWS S3 through django-storages
        - LocalStorageAdapter: MEDIA_ROOT on the local filesystem
        - MockStorageAdapter: in-memory, for tests
    """

    @abstractmethod
    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        """
        Store ``file`` under ``path``.

        Raises:
            StorageException: If the upload fails
        """

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove an object. Returns False when the key did not exist.

        Raises:
            StorageException: If the backend rejects the deletion
        """

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check whether ``key`` is stored."""

    @abstractmethod
    def get_url(self, key: str) -> str:
        """Public URL for ``key``."""

    @property
    @abstractmethod
    def bucket_name(self) -> str:
        """Bucket or root the adapter writes to."""

    def key_from_url(self, url: str) -> Optional[str]:
        """
        Recover the object key from a URL previously returned by ``get_url``.

        Returns None when the URL does not belong to this storage.
        """
        if not url:
            return None
        base = self.get_url("")
        if base and url.startswith(base):
            return url[len(base):].lstrip("/") or None
        return None


class StorageException(Exception):
    """Raised when a storage backend fails."""
