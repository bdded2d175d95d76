"""
Storage Factory
===============

Chooses the storage backend from ``settings.INFRASTRUCTURE["STORAGE_BACKEND"]``.
"""

import logging
from typing import Literal, Optional

from django.conf import settings

from .interface import StorageInterface
from .local_adapter import LocalStorageAdapter
from .mock_adapter import MockStorageAdapter
from .s3_adapter import S3StorageAdapter

logger = logging.getLogger(__name__)

StorageBackend = Literal["s3", "local", "mock"]


class StorageFactory:
    """
    Usage:
        storage = StorageFactory.create()          # from settings
        storage = StorageFactory.create("mock")    # explicit
    """

    @staticmethod
    def create(backend: Optional[StorageBackend] = None) -> StorageInterface:
        infrastructure = getattr(settings, "INFRASTRUCTURE", {})
        backend_type = backend or infrastructure.get("STORAGE_BACKEND", "s3")

        logger.info(f"Creating storage backend: {backend_type}")

        if backend_type == "s3":
            return S3StorageAdapter()
        if backend_type == "local":
            return LocalStorageAdapter()
        if backend_type == "mock":
            return MockStorageAdapter()
        raise ValueError(f"Invalid storage backend: {backend_type}. Must be 's3', 'local' or 'mock'")
