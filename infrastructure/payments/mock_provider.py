"""
Mock Payment Provider
======================

Behaves like Razorpay (same identifier shapes, HMAC-SHA256 signatures) without
any network calls. Tests register gateway payments with ``register_payment``.
"""

import hashlib
import hmac
import logging
import re
import secrets
import string
import time
from typing import Any, Dict, Optional

from .interface import GatewayOrder, GatewayPayment, PaymentException, PaymentProviderInterface, PaymentStatus

logger = logging.getLogger(__name__)

_ALPHABET = string.ascii_letters + string.digits


def _random_suffix(length: int = 14) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


class MockPaymentProvider(PaymentProviderInterface):
    name = "mock"
    order_id_pattern = re.compile(r"^order_[A-Za-z0-9]{10,40}$")
    payment_id_pattern = re.compile(r"^pay_[A-Za-z0-9]{10,40}$")
    signature_pattern = re.compile(r"^[a-f0-9]{64}$")

    def __init__(self, key_id: str = "rzp_test_mock", key_secret: str = "mock_razorpay_secret"):
        self.key_id = key_id
        self.key_secret = key_secret
        self.configured = True
        self.orders: Dict[str, GatewayOrder] = {}
        self.payments: Dict[str, GatewayPayment] = {}
        self.fail_fetch = False

    @property
    def public_key(self) -> str:
        return self.key_id

    def is_configured(self) -> bool:
        return self.configured

    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, Any]] = None,
    ) -> GatewayOrder:
        order = GatewayOrder(
            id=f"order_{_random_suffix()}",
            amount=int(amount),
            currency=currency.upper(),
            receipt=receipt,
            notes=dict(notes or {}),
        )
        self.orders[order.id] = order
        logger.info(f"[MOCK PAYMENT] Created order {order.id} for {amount}")
        return order

    def fetch_payment(self, payment_id: str) -> GatewayPayment:
        if self.fail_fetch:
            raise PaymentException("Mock gateway unavailable")
        payment = self.payments.get(payment_id)
        if payment is None:
            raise PaymentException(f"Payment {payment_id} not found")
        return payment

    def sign(self, order_id: str, payment_id: str) -> str:
        """Signature the gateway would attach to a checkout callback."""
        return hmac.new(
            self.key_secret.encode(),
            f"{order_id}|{payment_id}".encode(),
            hashlib.sha256,
        ).hexdigest()

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        return hmac.compare_digest(self.sign(order_id, payment_id), signature)

    def new_payment_id(self) -> str:
        return f"pay_{_random_suffix()}"

    def register_payment(
        self,
        payment_id: str,
        amount: int,
        order_id: Optional[str] = None,
        status: str = PaymentStatus.CAPTURED.value,
        currency: str = "INR",
        method: str = "upi",
    ) -> GatewayPayment:
        payment = GatewayPayment(
            id=payment_id,
            status=status,
            amount=int(amount),
            currency=currency,
            method=method,
            created_at=int(time.time()),
            order_id=order_id,
        )
        self.payments[payment_id] = payment
        return payment

    def reset(self):
        self.orders.clear()
        self.payments.clear()
        self.configured = True
        self.fail_fetch = False
