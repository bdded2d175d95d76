"""
PaymentService - checkout against the configured payment gateway.

Flow:
1. ``create_payment_order`` validates the basket and opens a gateway order
2. The browser completes payment at the gateway
3. ``verify_payment`` checks the callback signature, confirms the captured
   amount with the gateway and persists the order
"""

import re
import time
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from infrastructure.observability import tracer
from infrastructure.payments import PaymentException, PaymentProviderInterface, PaymentStatus
from marketplace.ordering.domain.services.commission_service import to_decimal
from payment_system.infra.observability import payment_orders_total, payment_verifications_total
from utils.logging_utils import mask_email
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

MAX_AMOUNT = Decimal("500000")
SUPPORTED_CURRENCIES = ("INR", "USD")
AMOUNT_TOLERANCE = Decimal("0.01")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^[6-9]\d{9}$")
NOT_CONFIGURED_MESSAGE = "Payment service not configured. Please contact administrator."


def _number(value) -> Optional[Decimal]:
    """JSON numbers only; strings and booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    return Decimal(str(value))


def _digits(value) -> str:
    return re.sub(r"\D", "", str(value or ""))


def _now_ms() -> int:
    return int(time.time() * 1000)


def basket_total(items: List[Dict[str, Any]], amount: Decimal, currency: str) -> Decimal:
    """
    Sum of price x quantity.

    Gateway-formatted items carry prices in paise; a price of 1000 or more
    against an INR amount below 10000 is read as paise.
    """
    total = Decimal("0")
    for item in items:
        price = to_decimal(item.get("price"))
        quantity = to_decimal(item.get("quantity")) or Decimal("1")
        if price >= 1000 and amount < 10000 and currency == "INR":
            price = price / 100
        total += price * quantity
    return total


def sanitize_customer(info: Dict[str, Any]) -> Dict[str, str]:
    def text(key, limit):
        return str(info.get(key) or "")[:limit]

    return {
        "customer_name": text("name", 100) or "Anonymous User",
        "customer_email": text("email", 100),
        "customer_phone": _digits(info.get("phone"))[:15],
        "customer_address": text("address", 500),
        "customer_city": text("city", 100),
        "customer_pincode": _digits(info.get("pincode"))[:10],
    }


class PaymentService(BaseService):
    def __init__(self, provider_getter: Callable[[], PaymentProviderInterface], order_service, inventory_service):
        """
        Args:
            provider_getter: Returns the gateway provider (injected via DI container)
            order_service: OrderService used to persist verified orders
            inventory_service: InventoryService for the stock pre-check
        """
        super().__init__()
        self._provider = provider_getter
        self.orders = order_service
        self.inventory = inventory_service

    def _configured_provider(self) -> Optional[PaymentProviderInterface]:
        provider = self._provider()
        return provider if provider.is_configured() else None

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @staticmethod
    def validate_checkout(data: Dict[str, Any]) -> Optional[str]:
        """Return the first validation message for a checkout payload, or None."""
        amount = _number(data.get("amount"))
        customer = data.get("customer_info")
        items = data.get("items")
        if data.get("amount") in (None, "", 0) or not customer or not items:
            return "Amount, customer info, and items are required"
        if amount is None or amount <= 0 or amount > MAX_AMOUNT:
            return "Amount must be a positive number between 1 and 500000"
        if (data.get("currency") or "INR") not in SUPPORTED_CURRENCIES:
            return "Invalid currency. Only INR and USD are supported"
        if not isinstance(customer, dict):
            return "Customer info must be an object"

        for field in ("name", "email", "phone"):
            value = customer.get(field)
            if not isinstance(value, str) or not value.strip():
                return f"Customer {field} is required and must be a non-empty string"
        if not EMAIL_RE.match(customer["email"]):
            return "Invalid email format"
        if not PHONE_RE.match(_digits(customer["phone"])):
            return "Invalid phone number format"

        if not isinstance(items, list) or not items:
            return "Items must be a non-empty array"
        for item in items:
            if not isinstance(item, dict):
                return "Each item must have id, name, price (number), and quantity (number)"
            price, quantity = _number(item.get("price")), _number(item.get("quantity"))
            if not item.get("id") or not item.get("name") or price is None or quantity is None:
                return "Each item must have id, name, price (number), and quantity (number)"
            if price <= 0 or quantity <= 0:
                return "Item price and quantity must be positive numbers"

        order_items = data.get("order_items")
        if isinstance(order_items, list) and not all(isinstance(item, dict) for item in order_items):
            return "Each order item must be an object"
        return None

    @BaseService.log_performance
    def create_payment_order(self, data: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        """
        Open a gateway order for a checkout basket.

        Args:
            data: ``amount``, ``currency``, ``customer_info {name, email, phone}``,
                ``items`` (gateway items) and optional ``order_items`` (cart lines)

        Returns:
            ServiceResult with ``{"order": {id, amount, currency, receipt}, "key": ...}``
        """
        provider = self._configured_provider()
        if provider is None:
            return service_err(ErrorCodes.PAYMENT_NOT_CONFIGURED, NOT_CONFIGURED_MESSAGE)

        with tracer.start_as_current_span("payments_create_order") as span:
            message = self.validate_checkout(data)
            if message:
                return service_err(ErrorCodes.VALIDATION_ERROR, message)

            amount = _number(data["amount"])
            currency = data.get("currency") or "INR"
            customer = data["customer_info"]
            order_items = data.get("order_items")
            has_order_items = isinstance(order_items, list) and len(order_items) > 0
            span.set_attribute("payment.currency", currency)

            calculated = basket_total(order_items if has_order_items else data["items"], amount, currency)
            if abs(calculated - amount) > AMOUNT_TOLERANCE:
                return service_err(
                    ErrorCodes.VALIDATION_ERROR, "Amount mismatch. Calculated total does not match provided amount"
                )

            if has_order_items:
                shortages = self.inventory.check_stock(order_items)
                if shortages:
                    return service_err(ErrorCodes.INSUFFICIENT_STOCK, "Stock insufficient for some items", shortages)

            try:
                gateway_order = provider.create_order(
                    amount=int((amount * 100).quantize(Decimal("1"))),
                    currency=currency,
                    receipt=f"receipt_{_now_ms()}"[:40],
                    notes={
                        "customer_name": customer["name"][:50],
                        "customer_email": customer["email"][:50],
                        "customer_phone": customer["phone"][:15],
                        "item_count": len(data["items"]),
                        "total_amount": float(amount),
                    },
                )
            except PaymentException as e:
                payment_orders_total.labels(currency=currency, status="failed").inc()
                self.logger.error(f"Gateway order creation failed: {e}")
                return service_err(ErrorCodes.PAYMENT_GATEWAY_ERROR, "Failed to create payment order")

            payment_orders_total.labels(currency=currency, status="created").inc()
            self.logger.info(
                f"Payment order {gateway_order.id} created for {amount} {currency} by {mask_email(customer['email'])}"
            )
            return service_ok(
                {
                    "order": {
                        "id": gateway_order.id,
                        "amount": gateway_order.amount,
                        "currency": gateway_order.currency,
                        "receipt": gateway_order.receipt,
                    },
                    "key": provider.public_key,
                }
            )

    # ------------------------------------------------------------------
    # Verify
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def verify_payment(self, data: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        """
        Verify a checkout callback and persist the paid order.

        Args:
            data: ``gateway_order_id``, ``payment_id``, ``signature``,
                ``customer_info``, ``items`` and ``amount``
        """
        provider = self._configured_provider()
        if provider is None:
            return service_err(ErrorCodes.PAYMENT_NOT_CONFIGURED, NOT_CONFIGURED_MESSAGE)

        with tracer.start_as_current_span("payments_verify") as span:
            gateway_order_id = data.get("gateway_order_id")
            payment_id = data.get("payment_id")
            signature = data.get("signature")
            if not gateway_order_id or not payment_id or not signature:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Missing payment verification data")
            format_error = provider.validate_identifiers(gateway_order_id, payment_id, signature)
            if format_error:
                return service_err(ErrorCodes.VALIDATION_ERROR, format_error)
            span.set_attribute("payment.id", payment_id)

            customer, items = data.get("customer_info"), data.get("items")
            if not customer or not items or not data.get("amount"):
                return service_err(ErrorCodes.VALIDATION_ERROR, "Missing customer info, items, or amount")
            amount = _number(data.get("amount"))
            if amount is None or amount <= 0:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid amount")
            if not isinstance(customer, dict) or not isinstance(items, list):
                return service_err(ErrorCodes.VALIDATION_ERROR, "Missing customer info, items, or amount")
            if not all(isinstance(item, dict) for item in items):
                return service_err(ErrorCodes.VALIDATION_ERROR, "Each item must be an object")

            existing = self.orders.find_existing(payment_id=payment_id)
            if existing is not None:
                payment_verifications_total.labels(result="duplicate").inc()
                return service_err(
                    ErrorCodes.PAYMENT_ALREADY_PROCESSED, "Payment already processed", {"order_id": existing.order_id}
                )

            if not provider.verify_payment_signature(gateway_order_id, payment_id, signature):
                payment_verifications_total.labels(result="bad_signature").inc()
                self.logger.warning(f"Signature verification failed for payment {payment_id}")
                return service_err(ErrorCodes.PAYMENT_VERIFICATION_FAILED, "Payment verification failed")

            try:
                payment = provider.fetch_payment(payment_id)
            except PaymentException as e:
                self.logger.warning(f"Could not fetch payment {payment_id} from gateway, relying on signature: {e}")
            else:
                if payment.status != PaymentStatus.CAPTURED.value:
                    payment_verifications_total.labels(result="not_captured").inc()
                    return service_err(
                        ErrorCodes.PAYMENT_VERIFICATION_FAILED, f"Payment not captured. Status: {payment.status}"
                    )
                if abs(Decimal(payment.amount) / 100 - amount) > AMOUNT_TOLERANCE:
                    payment_verifications_total.labels(result="amount_mismatch").inc()
                    return service_err(ErrorCodes.PAYMENT_VERIFICATION_FAILED, "Amount mismatch with Razorpay records")

            order_id = f"ORD{_now_ms()}{payment_id[-4:].upper()}"
            order = self.orders.place_order(
                fields={
                    "order_id": order_id,
                    "payment_id": payment_id,
                    "gateway_order_id": gateway_order_id,
                    "total": amount,
                    "payment_status": "completed",
                    **sanitize_customer(customer),
                },
                raw_items=items,
                source="payment",
                notify=False,
            )
            payment_verifications_total.labels(result="verified").inc()
            self.logger.info(
                f"Order {order_id} created for payment {payment_id} by {mask_email(order.customer_email)}"
            )
            return service_ok(
                {
                    "message": "Payment verified and order created successfully",
                    "order": {
                        "id": str(order.id),
                        "order_id": order_id,
                        "payment_id": payment_id,
                        "amount": float(amount),
                        "status": "completed",
                    },
                }
            )

    def get_payment_status(self, payment_id: str) -> ServiceResult[Dict[str, Any]]:
        provider = self._configured_provider()
        if provider is None:
            return service_err(ErrorCodes.PAYMENT_NOT_CONFIGURED, NOT_CONFIGURED_MESSAGE)
        try:
            payment = provider.fetch_payment(payment_id)
        except PaymentException as e:
            self.logger.error(f"Payment status lookup failed for {payment_id}: {e}")
            return service_err(ErrorCodes.PAYMENT_GATEWAY_ERROR, "Failed to fetch payment status")
        return service_ok(
            {
                "id": payment.id,
                "status": payment.status,
                "amount": payment.amount,
                "currency": payment.currency,
                "method": payment.method,
                "created_at": payment.created_at,
            }
        )
