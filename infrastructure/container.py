"""
Dependency Injection Container
================================

Service locator for infrastructure adapters and domain services. Views ask the
container for a service instead of constructing it, so tests can swap in mock
adapters with ``configure_for_testing``.

Usage:
    from infrastructure.container import container

    storage = container.storage()
    orders = container.order_service()
"""

import logging
from typing import Optional

from .email import EmailFactory, EmailServiceInterface
from .payments import PaymentFactory, PaymentProviderInterface
from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Lazily builds and caches one instance per service.

    Singleton: every ``ServiceContainer()`` call returns the same object.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._services = {}
            self._storage: Optional[StorageInterface] = None
            self._email: Optional[EmailServiceInterface] = None
            self._payment: Optional[PaymentProviderInterface] = None
            self._initialized = True
            logger.info("Service container initialized")

    # ------------------------------------------------------------------
    # Infrastructure adapters
    # ------------------------------------------------------------------

    def storage(self) -> StorageInterface:
        if self._storage is None:
            self._storage = StorageFactory.create()
            logger.debug(f"Created storage service: {type(self._storage).__name__}")
        return self._storage

    def email(self) -> EmailServiceInterface:
        if self._email is None:
            self._email = EmailFactory.create()
            logger.debug(f"Created email service: {type(self._email).__name__}")
        return self._email

    def payment(self) -> PaymentProviderInterface:
        if self._payment is None:
            self._payment = PaymentFactory.create()
            logger.debug(f"Created payment provider: {type(self._payment).__name__}")
        return self._payment

    # ------------------------------------------------------------------
    # Domain services
    # ------------------------------------------------------------------

    def _get(self, name, builder):
        if name not in self._services:
            self._services[name] = builder()
            logger.debug(f"Created {type(self._services[name]).__name__}")
        return self._services[name]

    def mailer(self):
        from notifications.domain.services.mailer import MailerService

        return self._get("mailer", lambda: MailerService(email_service_getter=self.email))

    def notification_service(self):
        from notifications.domain.services.notification_service import NotificationService

        return self._get("notification_service", NotificationService)

    def auth_service(self):
        from authentication.domain.services.auth_service import AuthService

        return self._get(
            "auth_service",
            lambda: AuthService(mailer=self.mailer(), notifications=self.notification_service()),
        )

    def seller_service(self):
        from authentication.domain.services.seller_service import SellerService

        return self._get("seller_service", lambda: SellerService(storage_getter=self.storage))

    def catalog_service(self):
        from marketplace.catalog.domain.services.catalog_service import CatalogService

        return self._get("catalog_service", lambda: CatalogService(storage_getter=self.storage))

    def media_service(self):
        from marketplace.catalog.domain.services.media_service import MediaService

        return self._get("media_service", lambda: MediaService(storage_getter=self.storage))

    def bulk_upload_service(self):
        from marketplace.catalog.domain.services.bulk_upload_service import BulkUploadService

        return self._get("bulk_upload_service", BulkUploadService)

    def commission_service(self):
        from marketplace.ordering.domain.services.commission_service import CommissionService

        return self._get("commission_service", CommissionService)

    def inventory_service(self):
        from marketplace.ordering.domain.services.inventory_service import InventoryService

        return self._get("inventory_service", InventoryService)

    def order_service(self):
        from marketplace.ordering.domain.services.order_service import OrderService

        return self._get(
            "order_service",
            lambda: OrderService(
                inventory_service=self.inventory_service(),
                commission_service=self.commission_service(),
                notification_service=self.notification_service(),
                mailer=self.mailer(),
            ),
        )

    def seller_portal_service(self):
        from marketplace.seller.domain.services.seller_portal_service import SellerPortalService

        return self._get(
            "seller_portal_service",
            lambda: SellerPortalService(
                commission_service=self.commission_service(),
                earnings_service=self.earnings_service(),
            ),
        )

    def payment_service(self):
        from payment_system.domain.services.payment_service import PaymentService

        return self._get(
            "payment_service",
            lambda: PaymentService(
                provider_getter=self.payment,
                order_service=self.order_service(),
                inventory_service=self.inventory_service(),
            ),
        )

    def earnings_service(self):
        from dashboard.domain.services.earnings_service import EarningsService

        return self._get("earnings_service", EarningsService)

    def dashboard_service(self):
        from dashboard.domain.services.dashboard_service import DashboardService

        return self._get(
            "dashboard_service",
            lambda: DashboardService(
                order_service=self.order_service(),
                seller_service=self.seller_service(),
            ),
        )

    # ------------------------------------------------------------------

    def reset(self):
        """Drop every cached adapter and service."""
        self._services = {}
        self._storage = None
        self._email = None
        self._payment = None
        logger.info("Service container reset")

    def configure_for_testing(self):
        """
        Reset and pin the in-memory adapters:
            - MockStorageAdapter
            - MockEmailService
            - MockPaymentProvider
        """
        self.reset()
        self._storage = StorageFactory.create("mock")
        self._email = EmailFactory.create("mock")
        self._payment = PaymentFactory.create("mock")
        logger.info("Service container configured for testing")


container = ServiceContainer()


def get_storage() -> StorageInterface:
    return container.storage()


def get_email() -> EmailServiceInterface:
    return container.email()


def get_payment() -> PaymentProviderInterface:
    return container.payment()
