"""
Stripe Payment Provider
========================

PaymentProviderInterface on Stripe PaymentIntents.

Mapping onto the order/verify checkout flow:
    - gateway order  -> PaymentIntent (``pi_...``)
    - payment id     -> the PaymentIntent's latest Charge (``ch_...`` / ``py_...``)
    - signature      -> the PaymentIntent client secret returned at creation
"""

import hmac
import logging
import re
from typing import Any, Dict, Optional

import stripe
from django.conf import settings
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .interface import GatewayOrder, GatewayPayment, PaymentException, PaymentProviderInterface, PaymentStatus

logger = logging.getLogger(__name__)

TRANSIENT_STRIPE_ERRORS = (stripe.RateLimitError, stripe.APIConnectionError, stripe.APIError)


class StripeProvider(PaymentProviderInterface):
    """
    Configuration (in settings.py):
        STRIPE_SECRET_KEY: Secret API key
        STRIPE_PUBLISHABLE_KEY: Publishable key for Stripe.js
    """

    name = "stripe"
    order_id_pattern = re.compile(r"^pi_[A-Za-z0-9]{10,64}$")
    payment_id_pattern = re.compile(r"^(ch|py)_[A-Za-z0-9]{10,64}$")
    signature_pattern = re.compile(r"^pi_[A-Za-z0-9]{10,64}_secret_[A-Za-z0-9]{10,64}$")

    def __init__(self):
        stripe.api_key = getattr(settings, "STRIPE_SECRET_KEY", "")
        self.publishable_key = getattr(settings, "STRIPE_PUBLISHABLE_KEY", "")
        if not stripe.api_key:
            logger.warning("STRIPE_SECRET_KEY not configured")

    @property
    def public_key(self) -> str:
        return self.publishable_key

    def is_configured(self) -> bool:
        return bool(stripe.api_key)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(TRANSIENT_STRIPE_ERRORS),
        reraise=True,
    )
    def _create_intent_api(self, **kwargs):
        return stripe.PaymentIntent.create(**kwargs)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(TRANSIENT_STRIPE_ERRORS),
        reraise=True,
    )
    def _retrieve_intent_api(self, intent_id: str):
        return stripe.PaymentIntent.retrieve(intent_id)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(TRANSIENT_STRIPE_ERRORS),
        reraise=True,
    )
    def _retrieve_charge_api(self, charge_id: str):
        return stripe.Charge.retrieve(charge_id)

    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, Any]] = None,
    ) -> GatewayOrder:
        metadata = {key: str(value) for key, value in (notes or {}).items()}
        metadata["receipt"] = receipt
        try:
            intent = self._create_intent_api(
                amount=int(amount),
                currency=currency.lower(),
                metadata=metadata,
                automatic_payment_methods={"enabled": True},
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe PaymentIntent creation failed: {str(e)}")
            raise PaymentException(f"Failed to create payment order: {str(e)}") from e

        logger.info(f"Created Stripe PaymentIntent {intent.id}")
        return GatewayOrder(
            id=intent.id,
            amount=intent.amount,
            currency=intent.currency.upper(),
            receipt=receipt,
            status=intent.status,
            client_secret=intent.client_secret,
            notes=metadata,
        )

    def fetch_payment(self, payment_id: str) -> GatewayPayment:
        try:
            charge = self._retrieve_charge_api(payment_id)
        except stripe.StripeError as e:
            logger.error(f"Stripe charge retrieval failed for {payment_id}: {str(e)}")
            raise PaymentException(f"Failed to fetch payment: {str(e)}") from e

        details = getattr(charge, "payment_method_details", None)
        return GatewayPayment(
            id=charge.id,
            status=self._map_charge_status(charge),
            amount=charge.amount,
            currency=charge.currency.upper(),
            method=getattr(details, "type", None) if details else None,
            created_at=charge.created,
            order_id=getattr(charge, "payment_intent", None),
        )

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        try:
            intent = self._retrieve_intent_api(order_id)
        except stripe.StripeError as e:
            logger.warning(f"Could not load PaymentIntent {order_id} for verification: {str(e)}")
            return False

        if not hmac.compare_digest(str(intent.client_secret or ""), str(signature)):
            return False
        return intent.latest_charge == payment_id

    @staticmethod
    def _map_charge_status(charge) -> str:
        if getattr(charge, "refunded", False):
            return PaymentStatus.REFUNDED.value
        if charge.status == "succeeded" and getattr(charge, "captured", False):
            return PaymentStatus.CAPTURED.value
        if charge.status == "succeeded":
            return PaymentStatus.AUTHORIZED.value
        if charge.status == "failed":
            return PaymentStatus.FAILED.value
        return PaymentStatus.CREATED.value
