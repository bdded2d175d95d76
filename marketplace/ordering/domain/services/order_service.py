"""
OrderService - order placement, lookup and status changes.

Order placement:
1. Validate required fields and reject dummy identifiers
2. Return the existing order for a repeated ``payment_id``/``order_id``
3. Pre-check stock, then compute commission per line item
4. Persist, decrement stock (best-effort) and notify admin and sellers (best-effort)
"""

from collections import OrderedDict
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import F, Q
from django.utils import timezone

from authentication.models import Seller
from infrastructure.observability import tracer
from marketplace.catalog.domain.models import Product
from marketplace.infra.observability import order_value, orders_created_total
from marketplace.ordering.domain.models import Order
from marketplace.ordering.domain.services.commission_service import to_decimal
from utils.formatting import format_inr
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

REQUIRED_ORDER_FIELDS = ("order_id", "payment_id", "total", "items", "customer_name")
DUMMY_ORDER_IDS = {"dummy_order", "test_order"}
DUMMY_PAYMENT_IDS = {"dummy_payment", "test_payment"}
CUSTOMER_FIELDS = ("customer_email", "customer_phone", "customer_address", "customer_city", "customer_pincode")


class OrderService(BaseService):
    def __init__(self, inventory_service, commission_service, notification_service, mailer):
        super().__init__()
        self.inventory = inventory_service
        self.commissions = commission_service
        self.notifications = notification_service
        self.mailer = mailer

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    @staticmethod
    def find_existing(order_id: Optional[str] = None, payment_id: Optional[str] = None) -> Optional[Order]:
        query = Q()
        if payment_id:
            query |= Q(payment_id=payment_id)
        if order_id:
            query |= Q(order_id=order_id)
        if not query:
            return None
        return Order.objects.filter(query).first()

    @BaseService.log_performance
    def create_order(self, data: Dict[str, Any], user=None) -> ServiceResult[Dict[str, Any]]:
        """
        Create an order from the checkout payload.

        Returns:
            ServiceResult with ``{"order": Order, "created": bool}``; ``created`` is
            False when an order with the same payment or order id already exists
        """
        with tracer.start_as_current_span("orders_create_order") as span:
            missing = [field for field in REQUIRED_ORDER_FIELDS if not data.get(field)]
            if missing:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Missing required fields", {"missing": missing})

            order_id = str(data["order_id"]).strip()
            payment_id = str(data["payment_id"]).strip()
            span.set_attribute("order.order_id", order_id)
            if order_id.lower() in DUMMY_ORDER_IDS or payment_id.lower() in DUMMY_PAYMENT_IDS:
                return service_err(
                    ErrorCodes.VALIDATION_ERROR, "Test data not allowed. Only real payment data will be saved."
                )

            items = data["items"]
            if not isinstance(items, list):
                return service_err(ErrorCodes.VALIDATION_ERROR, "Items must be a list")
            if not all(isinstance(item, dict) for item in items):
                return service_err(ErrorCodes.VALIDATION_ERROR, "Each item must be an object")
            total = to_decimal(data["total"], default=None)
            if total is None or total < 0:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid total")

            existing = self.find_existing(order_id=order_id, payment_id=payment_id)
            if existing is not None:
                self.logger.info(f"Idempotency: order {existing.order_id} already exists, skipping create")
                span.set_attribute("order.duplicate", True)
                return service_ok({"order": existing, "created": False})

            shortages = self.inventory.check_stock(items)
            if shortages:
                return service_err(ErrorCodes.INSUFFICIENT_STOCK, "Stock insufficient for some items", shortages)

            customer = user if getattr(user, "is_authenticated", False) else None
            order = self.place_order(
                fields={
                    "order_id": order_id,
                    "payment_id": payment_id,
                    "gateway_order_id": str(data.get("gateway_order_id") or ""),
                    "customer": customer,
                    "customer_name": str(data["customer_name"])[:100],
                    **{field: str(data.get(field) or "") for field in CUSTOMER_FIELDS},
                    "total": total,
                    "status": "processing",
                },
                raw_items=items,
                source="checkout",
            )
            return service_ok({"order": order, "created": True})

    def place_order(self, fields: Dict[str, Any], raw_items: List[Dict[str, Any]], source: str, notify: bool = True):
        """
        Persist an order with commission-annotated items and run the side effects.

        Used by checkout and by payment verification.
        """
        items = self.commissions.build_order_items(raw_items)
        fields.setdefault("payment_date", timezone.now())
        order = Order.objects.create(items=items, **fields)

        orders_created_total.labels(source=source).inc()
        order_value.observe(float(order.total))
        self.logger.info(f"Order {order.order_id} saved ({len(items)} items, source={source})")

        self.inventory.decrement_stock(items)
        if order.customer_id:
            get_user_model().objects.filter(pk=order.customer_id).update(
                order_count=F("order_count") + 1, total_spent=F("total_spent") + order.total
            )
        if notify:
            self._notify_admin(order)
            self._notify_sellers(order)
        return order

    def _notify_admin(self, order: Order) -> None:
        self.notifications.notify(
            title="New Order Received",
            message=(
                f"New order #{order.order_id} received from {order.customer_name} for {format_inr(order.total)}"
            ),
            type="order",
            priority="high",
            recipient_type="admin",
            related_entity_type="order",
            related_entity_id=str(order.id),
            action_url=f"/admin/orders/{order.id}",
            metadata={
                "order_id": order.order_id,
                "customer_name": order.customer_name,
                "customer_email": order.customer_email,
                "customer_phone": order.customer_phone,
                "order_total": float(order.total),
                "item_count": len(order.items),
                "order_date": order.payment_date.isoformat() if order.payment_date else None,
            },
        )
        self.mailer.send_new_order_alert(order)

    def _notify_sellers(self, order: Order) -> None:
        """One notification per seller summarizing their items and payout total."""
        try:
            product_ids = [item["product_id"] for item in order.items if item.get("product_id")]
            products = {
                str(p.pk): p
                for p in Product.objects.filter(pk__in=product_ids).select_related("seller__user", "created_by")
            }
            sellers_by_user = {
                str(s.user_id): s
                for s in Seller.objects.select_related("user").filter(
                    user_id__in=[p.created_by_id for p in products.values() if p.created_by_id]
                )
            }

            grouped: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
            for item in order.items:
                product = products.get(str(item.get("product_id")))
                if product is None:
                    continue
                seller = product.seller or sellers_by_user.get(str(product.created_by_id))
                if seller is None:
                    continue
                entry = grouped.setdefault(str(seller.user_id), {"seller": seller, "items": [], "payout": Decimal("0")})
                entry["items"].append(
                    {
                        "name": item.get("name"),
                        "quantity": item.get("quantity"),
                        "price": item.get("price"),
                        "seller_payout_amount": item.get("seller_payout_amount") or 0,
                    }
                )
                entry["payout"] += to_decimal(item.get("seller_payout_amount"))
        except (DjangoValidationError, ValueError) as e:
            self.logger.error(f"Failed to resolve sellers for order {order.order_id}: {e}")
            return

        for seller_user_id, entry in grouped.items():
            self.notifications.notify(
                title="New Order for Your Products",
                message=(
                    f"You have received a new order #{order.order_id} with {len(entry['items'])} item(s) "
                    f"for {format_inr(entry['payout'])}"
                ),
                type="order",
                priority="high",
                recipient_type="seller",
                recipient_id=seller_user_id,
                related_entity_type="order",
                related_entity_id=str(order.id),
                action_url=f"/seller/orders/{order.id}",
                metadata={
                    "order_id": order.order_id,
                    "customer_name": order.customer_name,
                    "seller_items": entry["items"],
                    "seller_payout_total": float(entry["payout"]),
                },
            )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def list_orders(self) -> List[Order]:
        return list(Order.objects.order_by("-created_at"))

    def my_orders(self, user) -> List[Order]:
        query = Q(customer_id=user.pk)
        if getattr(user, "email", None):
            query |= Q(customer_email__iexact=user.email)
        return list(Order.objects.filter(query).order_by("-created_at"))

    def get_by_order_id(self, order_id: str) -> ServiceResult[Order]:
        order = Order.objects.filter(order_id=order_id).first()
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        return service_ok(order)

    def get_by_payment_id(self, payment_id: str) -> ServiceResult[Order]:
        order = Order.objects.filter(payment_id=payment_id).first()
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found for this payment ID")
        return service_ok(order)

    @staticmethod
    def get_order(pk) -> Optional[Order]:
        try:
            return Order.objects.filter(pk=pk).first()
        except (DjangoValidationError, ValueError):
            return None

    # ------------------------------------------------------------------
    # Status changes
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def update_order_status(self, pk, status: str) -> ServiceResult[Order]:
        if status not in Order.STATUSES:
            return service_err(ErrorCodes.INVALID_STATUS, "Invalid status")
        order = self.get_order(pk)
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        return self.set_status(order, status)

    def set_status(self, order: Order, status: str) -> ServiceResult[Order]:
        """Set an order's status; the customer is emailed when it actually changes."""
        if status not in Order.STATUSES:
            return service_err(ErrorCodes.INVALID_STATUS, "Invalid status")
        previous = order.status
        if previous != status:
            order.status = status
            order.save(update_fields=["status", "updated_at"])
            self.logger.info(f"Order {order.order_id} status {previous} -> {status}")
            self.mailer.send_order_status_update(order, previous)
        return service_ok(order)

    def cancel_order(self, pk, user) -> ServiceResult[Order]:
        order = self.get_order(pk)
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")

        user_email = (getattr(user, "email", "") or "").lower()
        is_owner = (order.customer_id is not None and str(order.customer_id) == str(user.pk)) or (
            bool(order.customer_email) and bool(user_email) and order.customer_email.lower() == user_email
        )
        if not is_owner:
            return service_err(ErrorCodes.NOT_ORDER_OWNER, "You are not allowed to cancel this order")
        if order.status not in Order.CANCELLABLE_STATUSES:
            return service_err(ErrorCodes.ORDER_CANNOT_CANCEL, "Order cannot be cancelled at this stage")

        order.status = "cancelled"
        order.save(update_fields=["status", "updated_at"])
        self.logger.info(f"Order {order.order_id} cancelled by customer")
        return service_ok(order)

    @staticmethod
    def orders_containing(product_ids, queryset=None) -> List[Order]:
        """Orders (newest first) with at least one line item for the given products."""
        product_ids = {str(pid) for pid in product_ids}
        if not product_ids:
            return []
        queryset = Order.objects.all() if queryset is None else queryset
        return [order for order in queryset.order_by("-created_at") if order.product_ids & product_ids]

    def delete_all_orders(self) -> int:
        deleted_count, _ = Order.objects.all().delete()
        self.logger.warning(f"Deleted all orders ({deleted_count})")
        return deleted_count
