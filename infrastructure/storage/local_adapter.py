"""
Local Storage Adapter
=====================

StorageInterface writing to MEDIA_ROOT, for development without S3.
"""

import logging
from typing import BinaryIO

from django.conf import settings
from django.core.files.storage import FileSystemStorage

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class LocalStorageAdapter(StorageInterface):
    def __init__(self, location=None, base_url=None):
        self.storage = FileSystemStorage(
            location=location or settings.MEDIA_ROOT,
            base_url=base_url or settings.MEDIA_URL,
        )

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        try:
            saved_key = self.storage.save(path, file)
            logger.info(f"Stored file locally: {saved_key}")
            return StorageFile(
                key=saved_key,
                url=self.storage.url(saved_key),
                size=self.storage.size(saved_key),
                content_type=content_type,
                bucket=self.bucket_name,
            )
        except Exception as e:
            logger.error(f"Local upload failed for {path}: {str(e)}")
            raise StorageException(f"Local upload failed: {str(e)}") from e

    def delete(self, key: str) -> bool:
        if not self.storage.exists(key):
            return False
        try:
            self.storage.delete(key)
            return True
        except OSError as e:
            raise StorageException(f"Local deletion failed: {str(e)}") from e

    def exists(self, key: str) -> bool:
        return self.storage.exists(key)

    def get_url(self, key: str) -> str:
        return self.storage.url(key) if key else self.storage.base_url

    @property
    def bucket_name(self) -> str:
        return str(self.storage.location)
