"""
Storage Infrastructure Tests
=============================

Unit tests for the object storage abstraction layer.
"""

from io import BytesIO
from unittest.mock import MagicMock

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings

from infrastructure.storage import (
    MockStorageAdapter,
    S3StorageAdapter,
    StorageException,
    StorageFactory,
    StorageFile,
    StorageInterface,
)
from infrastructure.storage.uploads import build_key, store_upload


class StorageInterfaceTest(TestCase):
    """Test StorageInterface contract."""

    def test_interface_is_abstract(self):
        """StorageInterface should not be instantiable."""
        with self.assertRaises(TypeError):
            StorageInterface()

    def test_key_from_url(self):
        """Keys are recovered only from URLs under the adapter's base URL."""
        storage = MockStorageAdapter()

        self.assertEqual(
            storage.key_from_url("https://mock-storage.local/products/abc.jpg"), "products/abc.jpg"
        )
        self.assertIsNone(storage.key_from_url("https://elsewhere.example.com/products/abc.jpg"))
        self.assertIsNone(storage.key_from_url(""))


@override_settings(AWS_STORAGE_BUCKET_NAME="lmart-media", AWS_S3_REGION_NAME="ap-south-1", AWS_S3_CUSTOM_DOMAIN=None)
class S3StorageAdapterTest(TestCase):
    """Test S3StorageAdapter against a mocked S3Boto3Storage."""

    def setUp(self):
        self.backend = MagicMock()
        self.adapter = S3StorageAdapter(storage=self.backend)

    def test_upload_success(self):
        """Uploads return the saved key and its public URL."""
        self.backend.save.return_value = "products/a.jpg"
        self.backend.size.return_value = 4
        self.backend.url.return_value = "https://lmart-media.s3.ap-south-1.amazonaws.com/products/a.jpg"

        result = self.adapter.upload(BytesIO(b"data"), "products/a.jpg", "image/jpeg")

        self.assertIsInstance(result, StorageFile)
        self.assertEqual(result.key, "products/a.jpg")
        self.assertEqual(result.size, 4)
        self.assertEqual(result.bucket, "lmart-media")
        self.backend.save.assert_called_once()

    def test_upload_failure(self):
        """Backend errors surface as StorageException."""
        self.backend.save.side_effect = Exception("S3 down")

        with self.assertRaises(StorageException):
            self.adapter.upload(BytesIO(b"data"), "products/a.jpg", "image/jpeg")

    def test_delete(self):
        """Deleting a missing object returns False without calling delete."""
        self.backend.exists.side_effect = [True, False]

        self.assertTrue(self.adapter.delete("products/a.jpg"))
        self.assertFalse(self.adapter.delete("products/missing.jpg"))
        self.backend.delete.assert_called_once_with("products/a.jpg")

    def test_exists_swallows_errors(self):
        """A failing existence check reads as missing."""
        self.backend.exists.side_effect = Exception("timeout")

        self.assertFalse(self.adapter.exists("products/a.jpg"))

    def test_base_url(self):
        """The bare bucket URL is built from region and bucket."""
        self.assertEqual(self.adapter.get_url(""), "https://lmart-media.s3.ap-south-1.amazonaws.com/")
        self.assertEqual(
            self.adapter.key_from_url("https://lmart-media.s3.ap-south-1.amazonaws.com/banners/x.png"),
            "banners/x.png",
        )

    @override_settings(AWS_S3_CUSTOM_DOMAIN="cdn.lmart.test")
    def test_base_url_with_custom_domain(self):
        """A CDN domain replaces the bucket URL."""
        self.assertEqual(self.adapter.get_url(""), "https://cdn.lmart.test/")


class MockStorageAdapterTest(TestCase):
    """Test the in-memory adapter used by the suite."""

    def setUp(self):
        self.storage = MockStorageAdapter()

    def test_upload_and_delete(self):
        """Objects are kept in memory until deleted."""
        stored = self.storage.upload(BytesIO(b"hello"), "posters/p.png", "image/png")

        self.assertEqual(stored.url, "https://mock-storage.local/posters/p.png")
        self.assertEqual(stored.size, 5)
        self.assertTrue(self.storage.exists("posters/p.png"))
        self.assertTrue(self.storage.delete("posters/p.png"))
        self.assertFalse(self.storage.delete("posters/p.png"))
        self.assertEqual(self.storage.deleted_keys, ["posters/p.png", "posters/p.png"])

    def test_fail_uploads(self):
        """fail_uploads simulates an outage."""
        self.storage.fail_uploads = True

        with self.assertRaises(StorageException):
            self.storage.upload(BytesIO(b"x"), "posters/p.png", "image/png")


class UploadHelpersTest(TestCase):
    """Test key generation for request uploads."""

    def test_build_key_keeps_lowercase_extension(self):
        key = build_key("/banners/", "Summer SALE.JPG")

        self.assertTrue(key.startswith("banners/"))
        self.assertTrue(key.endswith(".jpg"))
        self.assertNotEqual(key, build_key("banners", "Summer SALE.JPG"))

    def test_store_upload_uses_file_content_type(self):
        storage = MockStorageAdapter()
        uploaded = SimpleUploadedFile("id.pdf", b"%PDF", content_type="application/pdf")

        stored = store_upload(storage, uploaded, "seller_verifications")

        self.assertTrue(stored.key.startswith("seller_verifications/"))
        self.assertEqual(stored.content_type, "application/pdf")


class StorageFactoryTest(TestCase):
    """Test StorageFactory backend selection."""

    def test_create_mock(self):
        self.assertIsInstance(StorageFactory.create("mock"), MockStorageAdapter)

    def test_invalid_backend(self):
        """Unknown backends raise ValueError."""
        with self.assertRaises(ValueError) as ctx:
            StorageFactory.create("ftp")

        self.assertIn("Invalid storage backend", str(ctx.exception))
