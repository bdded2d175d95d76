"""
Mock Storage Adapter
====================

In-memory StorageInterface used by the test suite.
"""

import logging
from typing import BinaryIO, Dict

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)

MOCK_BASE_URL = "https://mock-storage.local/"


class MockStorageAdapter(StorageInterface):
    """
    Keeps uploaded objects in a dict so tests can assert on them.

    Set ``fail_uploads`` to simulate a storage outage.
    """

    def __init__(self):
        self.objects: Dict[str, StorageFile] = {}
        self.deleted_keys = []
        self.fail_uploads = False

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        if self.fail_uploads:
            raise StorageException(f"Mock upload failure for {path}")
        data = file.read() if hasattr(file, "read") else b""
        stored = StorageFile(
            key=path,
            url=self.get_url(path),
            size=len(data),
            content_type=content_type,
            bucket=self.bucket_name,
        )
        self.objects[path] = stored
        logger.info(f"[MOCK STORAGE] Uploaded {path} ({len(data)} bytes)")
        return stored

    def delete(self, key: str) -> bool:
        self.deleted_keys.append(key)
        return self.objects.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return key in self.objects

    def get_url(self, key: str) -> str:
        return f"{MOCK_BASE_URL}{key}"

    @property
    def bucket_name(self) -> str:
        return "mock-bucket"

    def clear(self):
        self.objects.clear()
        self.deleted_keys.clear()
        self.fail_uploads = False
