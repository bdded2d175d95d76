"""
InventoryService - stock pre-checks and the post-order stock decrement.

The decrement runs after the order row is written and is not atomic with it;
a failure is logged and counted, never raised.
"""

from collections import OrderedDict
from typing import Any, Dict, List

from marketplace.catalog.domain.models import Product
from marketplace.infra.observability import stock_decrement_failures_total
from marketplace.ordering.domain.services.commission_service import item_product_id, products_by_id, to_decimal
from utils.service_base import BaseService


def requested_quantities(items: List[Dict[str, Any]]) -> "OrderedDict[str, int]":
    """Total requested quantity per product; items without a product or quantity are skipped."""
    requested: "OrderedDict[str, int]" = OrderedDict()
    for item in items or []:
        product_id = item_product_id(item)
        quantity = int(to_decimal(item.get("quantity")))
        if not product_id or quantity <= 0:
            continue
        requested[product_id] = requested.get(product_id, 0) + quantity
    return requested


class InventoryService(BaseService):
    def check_stock(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Products whose stock cannot cover the request.

        Returns:
            ``[{product_id, name, requested, available}]``; unknown products are skipped
        """
        requested = requested_quantities(items)
        products = products_by_id(requested.keys(), fields=("id", "name", "stock_quantity"))

        shortages = []
        for product_id, quantity in requested.items():
            product = products.get(product_id)
            if product is None:
                continue
            if quantity > product.stock_quantity:
                shortages.append(
                    {
                        "product_id": product_id,
                        "name": product.name,
                        "requested": quantity,
                        "available": product.stock_quantity,
                    }
                )
        return shortages

    def decrement_stock(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Best-effort: stock becomes ``max(0, before - qty)`` and ``in_stock`` follows it.

        Returns:
            The applied updates ``[{product_id, before, ordered, after}]``
        """
        updates = []
        try:
            for product_id, quantity in requested_quantities(items).items():
                product = products_by_id([product_id], fields=("id", "stock_quantity", "in_stock")).get(product_id)
                if product is None:
                    continue
                before = product.stock_quantity
                after = max(0, before - quantity)
                Product.objects.filter(pk=product.pk).update(stock_quantity=after, in_stock=after > 0)
                updates.append({"product_id": product_id, "before": before, "ordered": quantity, "after": after})
        except Exception as e:
            stock_decrement_failures_total.inc()
            self.logger.error(f"Failed to update product stock quantities: {e}", exc_info=True)
            return updates

        if updates:
            self.logger.info(f"Stock updated for ordered products: {updates}")
        return updates
