"""
Razorpay Payment Provider
==========================

PaymentProviderInterface backed by the official ``razorpay`` SDK.
"""

import logging
import re
from typing import Any, Dict, Optional

import razorpay
from django.conf import settings
from razorpay.errors import GatewayError, ServerError, SignatureVerificationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .interface import GatewayOrder, GatewayPayment, PaymentException, PaymentProviderInterface

logger = logging.getLogger(__name__)


class RazorpayProvider(PaymentProviderInterface):
    """
    Configuration (in settings.py):
        RAZORPAY_KEY_ID: API key id (also sent to the checkout widget)
        RAZORPAY_KEY_SECRET: API secret, used for signature verification
    """

    name = "razorpay"
    order_id_pattern = re.compile(r"^order_[A-Za-z0-9]{10,40}$")
    payment_id_pattern = re.compile(r"^pay_[A-Za-z0-9]{10,40}$")
    signature_pattern = re.compile(r"^[a-f0-9]{64}$")

    def __init__(self, key_id: str = None, key_secret: str = None, client=None):
        self.key_id = key_id if key_id is not None else getattr(settings, "RAZORPAY_KEY_ID", "")
        self.key_secret = key_secret if key_secret is not None else getattr(settings, "RAZORPAY_KEY_SECRET", "")
        self.client = client
        if self.client is None and self.is_configured():
            self.client = razorpay.Client(auth=(self.key_id, self.key_secret))
        if not self.is_configured():
            logger.warning("Razorpay credentials not configured")

    @property
    def public_key(self) -> str:
        return self.key_id

    def is_configured(self) -> bool:
        return bool(self.key_id and self.key_secret)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((ServerError, GatewayError)),
        reraise=True,
    )
    def _create_order_api(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.order.create(data=data)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((ServerError, GatewayError)),
        reraise=True,
    )
    def _fetch_payment_api(self, payment_id: str) -> Dict[str, Any]:
        return self.client.payment.fetch(payment_id)

    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, Any]] = None,
    ) -> GatewayOrder:
        if not self.is_configured():
            raise PaymentException("Razorpay is not configured")
        try:
            order = self._create_order_api(
                {
                    "amount": int(amount),
                    "currency": currency.upper(),
                    "receipt": receipt,
                    "notes": notes or {},
                }
            )
        except Exception as e:
            logger.error(f"Razorpay order creation failed: {str(e)}")
            raise PaymentException(f"Failed to create payment order: {str(e)}") from e

        logger.info(f"Created Razorpay order {order.get('id')}")
        return GatewayOrder(
            id=order["id"],
            amount=int(order.get("amount", amount)),
            currency=order.get("currency", currency.upper()),
            receipt=order.get("receipt", receipt),
            status=order.get("status", "created"),
            notes=order.get("notes") or {},
        )

    def fetch_payment(self, payment_id: str) -> GatewayPayment:
        if not self.is_configured():
            raise PaymentException("Razorpay is not configured")
        try:
            payment = self._fetch_payment_api(payment_id)
        except Exception as e:
            logger.error(f"Razorpay payment fetch failed for {payment_id}: {str(e)}")
            raise PaymentException(f"Failed to fetch payment: {str(e)}") from e

        return GatewayPayment(
            id=payment["id"],
            status=payment.get("status", ""),
            amount=int(payment.get("amount", 0)),
            currency=payment.get("currency", ""),
            method=payment.get("method"),
            created_at=payment.get("created_at"),
            order_id=payment.get("order_id"),
        )

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        if not self.is_configured():
            return False
        params = {
            "razorpay_order_id": order_id,
            "razorpay_payment_id": payment_id,
            "razorpay_signature": signature,
        }
        try:
            return bool(self.client.utility.verify_payment_signature(params))
        except SignatureVerificationError:
            logger.warning(f"Razorpay signature mismatch for payment {payment_id}")
            return False
