"""
Helpers for storing Django ``UploadedFile`` objects through StorageInterface.
"""

import os
import uuid

from .interface import StorageFile, StorageInterface


def build_key(folder: str, filename: str) -> str:
    """Unique object key under ``folder`` keeping the original extension."""
    ext = os.path.splitext(filename or "")[1].lower()
    return f"{folder.strip('/')}/{uuid.uuid4().hex}{ext}"


def store_upload(storage: StorageInterface, uploaded_file, folder: str) -> StorageFile:
    """
    Upload a request file under ``folder``.

    Raises:
        StorageException: If the backend fails
    """
    content_type = getattr(uploaded_file, "content_type", None) or "application/octet-stream"
    key = build_key(folder, getattr(uploaded_file, "name", ""))
    return storage.upload(uploaded_file, key, content_type)
