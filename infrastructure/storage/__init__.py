"""
Storage Abstraction Layer
==========================

Object storage for uploaded media (S3, local filesystem, in-memory).
"""

from .factory import StorageFactory
from .interface import StorageException, StorageFile, StorageInterface
from .local_adapter import LocalStorageAdapter
from .mock_adapter import MockStorageAdapter
from .s3_adapter import S3StorageAdapter

__all__ = [
    "StorageInterface",
    "StorageFile",
    "StorageException",
    "S3StorageAdapter",
    "LocalStorageAdapter",
    "MockStorageAdapter",
    "StorageFactory",
]
