"""
Payment Gateway Abstraction Layer
==================================
"""

from .factory import PaymentFactory
from .interface import (
    GatewayOrder,
    GatewayPayment,
    PaymentException,
    PaymentProviderInterface,
    PaymentStatus,
)
from .mock_provider import MockPaymentProvider
from .razorpay_provider import RazorpayProvider
from .stripe_provider import StripeProvider

__all__ = [
    "PaymentProviderInterface",
    "GatewayOrder",
    "GatewayPayment",
    "PaymentStatus",
    "PaymentException",
    "RazorpayProvider",
    "StripeProvider",
    "MockPaymentProvider",
    "PaymentFactory",
]
