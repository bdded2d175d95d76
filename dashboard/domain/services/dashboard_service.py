"""
DashboardService - admin overview of customers, orders and sellers.
"""

from typing import Any, Dict, List

from django.contrib.auth import get_user_model
from django.db.models import Sum

from marketplace.catalog.domain.models import Product
from marketplace.catalog.domain.services.catalog_service import seller_product_ids
from marketplace.ordering.domain.models import Order
from marketplace.ordering.domain.services.commission_service import item_product_id, money
from utils.rbac import ROLE_CUSTOMER
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

User = get_user_model()

RECENT_SELLER_ORDERS = 5


class DashboardService(BaseService):
    def __init__(self, order_service, seller_service):
        super().__init__()
        self.orders = order_service
        self.sellers = seller_service

    @BaseService.log_performance
    def stats(self) -> Dict[str, Any]:
        revenue = Order.objects.aggregate(total=Sum("total"))["total"]
        return {
            "total_customers": User.objects.filter(role=ROLE_CUSTOMER).count(),
            "total_orders": Order.objects.count(),
            "total_revenue": money(revenue) if revenue is not None else 0,
            "pending_orders": Order.objects.filter(status="pending").count(),
            "total_products": Product.objects.count(),
        }

    def customers(self):
        return list(User.objects.filter(role=ROLE_CUSTOMER).order_by("-created_at"))

    def orders_with_sellers(self) -> List[Dict[str, Any]]:
        """
        Every order (newest first) as ``(order, items)`` pairs, each item
        carrying the ``seller_id``/``seller_name`` of its product.
        """
        orders = self.orders.list_orders()
        product_ids = {item_product_id(item) for order in orders for item in order.items or []}
        product_ids.discard(None)

        owners = {}
        for product in Product.objects.filter(pk__in=product_ids).select_related("seller", "created_by"):
            if product.seller_id:
                owners[str(product.pk)] = (str(product.seller_id), product.seller_name or product.seller.seller_name)
            elif product.created_by_id:
                owners[str(product.pk)] = (str(product.created_by_id), product.seller_name or product.created_by.name)

        enriched = []
        for order in orders:
            items = []
            for item in order.items or []:
                seller_id, seller_name = owners.get(str(item_product_id(item)), (None, None))
                items.append({**item, "seller_id": seller_id, "seller_name": seller_name})
            enriched.append((order, items))
        return enriched

    def update_order_status(self, pk, status: str) -> ServiceResult[Order]:
        order = self.orders.get_order(pk)
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        return self.orders.set_status(order, status)

    def delete_all_orders(self) -> Dict[str, Any]:
        deleted_count = self.orders.delete_all_orders()
        return {"message": "All orders deleted successfully", "deleted_count": deleted_count}

    # ------------------------------------------------------------------
    # Sellers
    # ------------------------------------------------------------------

    def list_sellers(self):
        return self.sellers.list_sellers()

    @BaseService.log_performance
    def seller_detail(self, seller_id) -> ServiceResult[Dict[str, Any]]:
        """Seller profile with product count and the newest orders for its products."""
        result = self.sellers.get_seller(seller_id)
        if not result.ok:
            return result
        seller = result.value

        product_ids = seller_product_ids(seller.user_id, seller)
        recent_orders = self.orders.orders_containing(product_ids)[:RECENT_SELLER_ORDERS]
        return service_ok(
            {
                "seller": seller,
                "summary": {"products_count": len(product_ids), "recent_orders": recent_orders},
            }
        )

    def update_seller(self, seller_id, data: Dict[str, Any]):
        return self.sellers.update_seller(seller_id, data)

    def review_verification(self, seller_id, action: str, note: str = ""):
        return self.sellers.review_verification(seller_id, action, note)
