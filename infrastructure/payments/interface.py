"""
Payment Provider Interface
===========================

Contract for the checkout flow used by the storefront:

1. ``create_order`` opens a gateway order for the basket total.
2. The browser completes payment and posts back (order id, payment id,
   signature).
3. ``verify_payment_signature`` proves the callback came from the gateway and
   ``fetch_payment`` confirms the captured amount.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class PaymentStatus(str, Enum):
    """Gateway-side payment status."""

    CREATED = "created"
    AUTHORIZED = "authorized"
    CAPTURED = "captured"
    REFUNDED = "refunded"
    FAILED = "failed"


@dataclass
class GatewayOrder:
    """
    An order opened at the payment gateway.

    Attributes:
        id: Gateway order identifier (e.g. ``order_Nx...`` for Razorpay)
        amount: Amount in minor units (paise / cents)
        currency: ISO currency code, upper case
        receipt: Merchant receipt reference
        status: Gateway order status
        client_secret: Secret the browser needs to finish payment, if any
    """

    id: str
    amount: int
    currency: str
    receipt: str
    status: str = "created"
    client_secret: Optional[str] = None
    notes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GatewayPayment:
    """
    A payment as recorded by the gateway.

    Attributes:
        id: Gateway payment identifier
        status: One of PaymentStatus values (as str)
        amount: Amount in minor units
        currency: ISO currency code
        method: Payment method (card, upi, netbanking ...)
        created_at: Unix timestamp
    """

    id: str
    status: str
    amount: int
    currency: str
    method: Optional[str] = None
    created_at: Optional[int] = None
    order_id: Optional[str] = None


class PaymentProviderInterface(ABC):
    """
    Implementations:
        - RazorpayProvider: Razorpay orders and HMAC signature verification
        - StripeProvider: Stripe PaymentIntents
        - MockPaymentProvider: in-memory gateway for tests
    """

    name: str = ""
    order_id_pattern = re.compile(r".+")
    payment_id_pattern = re.compile(r".+")
    signature_pattern = re.compile(r".+")

    @property
    @abstractmethod
    def public_key(self) -> str:
        """Key handed to the browser checkout widget."""

    @abstractmethod
    def is_configured(self) -> bool:
        """True when credentials are present."""

    @abstractmethod
    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, Any]] = None,
    ) -> GatewayOrder:
        """
        Open a gateway order.

        Args:
            amount: Amount in minor units
            currency: ISO currency code
            receipt: Merchant receipt reference (max 40 chars)
            notes: Free-form metadata stored with the order

        Raises:
            PaymentException: If the gateway rejects the request
        """

    @abstractmethod
    def fetch_payment(self, payment_id: str) -> GatewayPayment:
        """
        Retrieve a payment from the gateway.

        Raises:
            PaymentException: If the payment cannot be fetched
        """

    @abstractmethod
    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        """Check the checkout callback signature. Never raises for a bad signature."""

    def validate_identifiers(self, order_id: str, payment_id: str, signature: str) -> Optional[str]:
        """Return an error message if any identifier has the wrong shape."""
        if not order_id or not self.order_id_pattern.match(order_id):
            return "Invalid order ID format"
        if not payment_id or not self.payment_id_pattern.match(payment_id):
            return "Invalid payment ID format"
        if not signature or not self.signature_pattern.match(signature):
            return "Invalid signature format"
        return None


class PaymentException(Exception):
    """Raised when the payment gateway fails or rejects a request."""
