"""
Service Container Tests
========================

Unit tests for the dependency injection container.
"""

from django.test import TestCase, override_settings

from authentication.domain.services.auth_service import AuthService
from infrastructure.container import ServiceContainer, container, get_email, get_payment, get_storage
from infrastructure.email import MockEmailService
from infrastructure.payments import MockPaymentProvider, PaymentProviderInterface
from infrastructure.storage import LocalStorageAdapter, MockStorageAdapter, StorageInterface


class ServiceContainerTest(TestCase):
    """Test ServiceContainer caching and test configuration."""

    def setUp(self):
        container.reset()

    def tearDown(self):
        container.configure_for_testing()

    def test_container_is_singleton(self):
        """Every ServiceContainer() is the module-level container."""
        self.assertIs(ServiceContainer(), ServiceContainer())
        self.assertIs(ServiceContainer(), container)

    def test_adapters_come_from_settings_and_are_cached(self):
        """Test settings select the in-memory adapters."""
        storage = container.storage()

        self.assertIsInstance(storage, StorageInterface)
        self.assertIsInstance(storage, MockStorageAdapter)
        self.assertIs(storage, container.storage())
        self.assertIs(get_storage(), storage)
        self.assertIs(get_email(), container.email())
        self.assertIsInstance(get_payment(), PaymentProviderInterface)

    @override_settings(INFRASTRUCTURE={"STORAGE_BACKEND": "local", "EMAIL_BACKEND_TYPE": "mock"})
    def test_local_storage_backend(self):
        """STORAGE_BACKEND=local selects the filesystem adapter."""
        self.assertIsInstance(container.storage(), LocalStorageAdapter)

    def test_domain_services_are_cached(self):
        """Domain services are built once and share the cached adapters."""
        auth = container.auth_service()

        self.assertIsInstance(auth, AuthService)
        self.assertIs(auth, container.auth_service())
        self.assertIs(auth.mailer, container.mailer())
        self.assertIs(auth.notifications, container.notification_service())

    def test_reset_drops_cached_instances(self):
        """reset() forces new instances on next access."""
        storage = container.storage()
        orders = container.order_service()

        container.reset()

        self.assertIsNot(storage, container.storage())
        self.assertIsNot(orders, container.order_service())

    def test_configure_for_testing(self):
        """configure_for_testing pins fresh mock adapters."""
        container.payment().configured = False

        container.configure_for_testing()

        self.assertIsInstance(container.storage(), MockStorageAdapter)
        self.assertIsInstance(container.email(), MockEmailService)
        self.assertIsInstance(container.payment(), MockPaymentProvider)
        self.assertTrue(container.payment().is_configured())
