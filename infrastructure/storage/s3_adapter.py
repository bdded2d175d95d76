"""
S3 Storage Adapter
==================

StorageInterface backed by AWS S3 through django-storages.
"""

import logging
from typing import BinaryIO

from django.conf import settings
from storages.backends.s3boto3 import S3Boto3Storage

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class S3StorageAdapter(StorageInterface):
    """
    AWS S3 storage.

    Configuration (in settings.py):
        AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY: credentials
        AWS_STORAGE_BUCKET_NAME: bucket
        AWS_S3_REGION_NAME: region (default ap-south-1)
        AWS_S3_CUSTOM_DOMAIN: optional CDN domain
    """

    def __init__(self, storage: S3Boto3Storage = None):
        self.storage = storage or S3Boto3Storage()
        self._bucket_name = getattr(settings, "AWS_STORAGE_BUCKET_NAME", "")

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        try:
            if hasattr(file, "content_type"):
                file.content_type = content_type
            saved_key = self.storage.save(path, file)
            size = getattr(file, "size", None)
            if size is None:
                size = self.storage.size(saved_key)
            url = self.storage.url(saved_key)
            logger.info(f"Uploaded object to S3: {saved_key}")
            return StorageFile(
                key=saved_key,
                url=url,
                size=size,
                content_type=content_type,
                bucket=self._bucket_name,
            )
        except Exception as e:
            logger.error(f"Failed to upload {path} to S3: {str(e)}")
            raise StorageException(f"S3 upload failed: {str(e)}") from e

    def delete(self, key: str) -> bool:
        try:
            if not self.storage.exists(key):
                logger.warning(f"S3 object not found, nothing to delete: {key}")
                return False
            self.storage.delete(key)
            logger.info(f"Deleted S3 object: {key}")
            return True
        except Exception as e:
            logger.error(f"Failed to delete S3 object {key}: {str(e)}")
            raise StorageException(f"S3 deletion failed: {str(e)}") from e

    def exists(self, key: str) -> bool:
        try:
            return self.storage.exists(key)
        except Exception as e:
            logger.error(f"Error checking S3 object {key}: {str(e)}")
            return False

    def get_url(self, key: str) -> str:
        if key:
            return self.storage.url(key)
        domain = getattr(settings, "AWS_S3_CUSTOM_DOMAIN", None)
        if domain:
            return f"https://{domain}/"
        region = getattr(settings, "AWS_S3_REGION_NAME", "ap-south-1")
        return f"https://{self._bucket_name}.s3.{region}.amazonaws.com/"

    @property
    def bucket_name(self) -> str:
        return self._bucket_name
