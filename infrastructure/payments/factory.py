"""
Payment Provider Factory
=========================

Chooses the gateway from ``settings.INFRASTRUCTURE["PAYMENT_PROVIDER"]``.
"""

import logging
from typing import Literal, Optional

from django.conf import settings

from .interface import PaymentProviderInterface
from .mock_provider import MockPaymentProvider
from .razorpay_provider import RazorpayProvider
from .stripe_provider import StripeProvider

logger = logging.getLogger(__name__)

PaymentBackend = Literal["razorpay", "stripe", "mock"]


class PaymentFactory:
    @staticmethod
    def create(backend: Optional[PaymentBackend] = None) -> PaymentProviderInterface:
        """
        Create a payment provider.

        Raises:
            ValueError: If the provider name is unknown
        """
        infrastructure = getattr(settings, "INFRASTRUCTURE", {})
        backend_type = backend or infrastructure.get("PAYMENT_PROVIDER", "razorpay")

        logger.info(f"Creating payment provider: {backend_type}")

        if backend_type == "razorpay":
            return RazorpayProvider()
        if backend_type == "stripe":
            return StripeProvider()
        if backend_type == "mock":
            return MockPaymentProvider(
                key_id=getattr(settings, "RAZORPAY_KEY_ID", "") or "rzp_test_mock",
                key_secret=getattr(settings, "RAZORPAY_KEY_SECRET", "") or "mock_razorpay_secret",
            )
        raise ValueError(f"Invalid payment provider: {backend_type}. Must be 'razorpay', 'stripe' or 'mock'")
