"""
SellerPortalService - the approved seller's view of products, orders and earnings.

A seller owns a product when it was created by the seller's user or is
attached to the seller profile. Orders are visible to a seller as soon as one
line item is for a product they own; only those items are exposed.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.db.models import Q

from authentication.models import Seller
from marketplace.categories import normalize_category
from marketplace.catalog.domain.models import Product
from marketplace.catalog.domain.services.catalog_service import (
    apply_name_search,
    find_product,
    paginate,
    seller_product_ids,
)
from marketplace.ordering.domain.models import Order
from marketplace.ordering.domain.services.commission_service import item_product_id, money, to_decimal
from marketplace.ordering.domain.services.order_service import OrderService
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

STATUS_SUMMARY_KEYS = ("pending", "processing", "shipped", "delivered", "cancelled")


def seller_items(order: Order, product_ids) -> List[Dict[str, Any]]:
    return [item for item in order.items or [] if str(item_product_id(item)) in product_ids]


def customer_info(order: Order) -> Dict[str, Any]:
    return {
        "name": order.customer_name,
        "email": order.customer_email,
        "phone": order.customer_phone,
        "address": order.customer_address,
        "city": order.customer_city,
        "pincode": order.customer_pincode,
    }


class SellerPortalService(BaseService):
    def __init__(self, commission_service, earnings_service):
        super().__init__()
        self.commissions = commission_service
        self.earnings_service = earnings_service

    @staticmethod
    def owns(product: Product, user, seller: Optional[Seller] = None) -> bool:
        if product.created_by_id is not None and str(product.created_by_id) == str(user.pk):
            return True
        return seller is not None and product.seller_id is not None and product.seller_id == seller.pk

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self, user, seller: Seller, filters: Dict[str, Any], page: int = 1, limit: int = 50):
        """
        Args:
            filters: ``category``, ``is_active``, ``in_stock`` (booleans or None) and ``search``
        """
        queryset = Product.objects.filter(Q(created_by_id=user.pk) | Q(seller=seller))
        if filters.get("category"):
            queryset = queryset.filter(category=normalize_category(filters["category"]))
        if filters.get("is_active") is not None:
            queryset = queryset.filter(is_active=filters["is_active"])
        if filters.get("in_stock") is not None:
            queryset = queryset.filter(in_stock=filters["in_stock"])
        queryset = apply_name_search(queryset, filters.get("search"))
        return paginate(queryset.order_by("-created_at"), page, limit)

    def toggle_product(self, product_id, user, seller: Seller) -> ServiceResult[Product]:
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        if not self.owns(product, user, seller):
            return service_err(ErrorCodes.PERMISSION_DENIED, "Not authorized to modify this product")

        product.is_active = not product.is_active
        product.updated_by = user
        product.save(update_fields=["is_active", "updated_by", "updated_at"])
        self.logger.info(f"Seller {seller.pk} toggled product {product.pk} to active={product.is_active}")
        return service_ok(product)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    @staticmethod
    def _seller_orders(product_ids, status: Optional[str] = None) -> List[Order]:
        queryset = Order.objects.all()
        if status:
            queryset = queryset.filter(status=status)
        return OrderService.orders_containing(product_ids, queryset)

    def order_payload(self, order: Order, product_ids) -> Dict[str, Any]:
        items = seller_items(order, product_ids)
        seller_total = sum(
            (to_decimal(item.get("price")) * to_decimal(item.get("quantity")) for item in items), Decimal("0")
        )
        return {
            "order": order,
            "customer_info": customer_info(order),
            "seller_items": items,
            "seller_total": money(seller_total),
            "item_count": len(items),
            "total_quantity": sum(int(to_decimal(item.get("quantity"))) for item in items),
        }

    @BaseService.log_performance
    def list_orders(self, user, seller: Seller, status: Optional[str] = None, page: int = 1, limit: int = 20):
        product_ids = seller_product_ids(user.pk, seller)
        orders = self._seller_orders(product_ids, status)
        total = len(orders)
        offset = (page - 1) * limit
        return {
            "data": [self.order_payload(order, product_ids) for order in orders[offset : offset + limit]],
            "pagination": {"current": page, "pages": (total + limit - 1) // limit, "total": total},
        }

    def recent_orders(self, user, seller: Seller, limit: int = 5) -> Dict[str, Any]:
        """Newest orders plus a count of all seller orders per status."""
        product_ids = seller_product_ids(user.pk, seller)
        orders = self._seller_orders(product_ids)

        summary = {"total": len(orders), **{key: 0 for key in STATUS_SUMMARY_KEYS}}
        for order in orders:
            if order.status in summary:
                summary[order.status] += 1
        return {
            "data": [self.order_payload(order, product_ids) for order in orders[:limit]],
            "summary": summary,
        }

    def _owned_order(self, pk, user, seller: Seller):
        order = OrderService.get_order(pk)
        if order is None:
            return None, None, service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        product_ids = seller_product_ids(user.pk, seller)
        if not order.product_ids & product_ids:
            return None, None, service_err(ErrorCodes.PERMISSION_DENIED, "Not authorized to view this order")
        return order, product_ids, None

    def order_detail(self, pk, user, seller: Seller) -> ServiceResult[Dict[str, Any]]:
        order, product_ids, error = self._owned_order(pk, user, seller)
        if error:
            return error
        return service_ok(self.order_payload(order, product_ids))

    @BaseService.log_performance
    def update_order_status(self, pk, status: str, user, seller: Seller) -> ServiceResult[Dict[str, Any]]:
        if status not in Order.STATUSES:
            return service_err(ErrorCodes.INVALID_STATUS, "Invalid status")
        order, product_ids, error = self._owned_order(pk, user, seller)
        if error:
            return error
        if order.status != status:
            self.logger.info(f"Seller {seller.pk} moved order {order.order_id} {order.status} -> {status}")
            order.status = status
            order.save(update_fields=["status", "updated_at"])
        return service_ok(self.order_payload(order, product_ids))

    # ------------------------------------------------------------------
    # Money
    # ------------------------------------------------------------------

    def earnings(self, user, seller: Seller, range_name=None, weeks=None, months=None, years=None):
        return self.earnings_service.seller_earnings(
            seller,
            seller_product_ids(user.pk, seller),
            range_name=range_name,
            weeks=weeks,
            months=months,
            years=years,
        )

    def category_commission(self, category: str):
        return self.commissions.get_category_commission(category)
