"""
CommissionService - per-category platform commission.

Unknown categories (and categories without a row) are charged the default 2%.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError

from marketplace.catalog.domain.models import Product
from marketplace.categories import CATEGORIES, is_valid_category, normalize_category
from marketplace.ordering.domain.models import DEFAULT_COMMISSION_PERCENT, CategoryCommission
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

CENT = Decimal("0.01")


def to_decimal(value, default: Decimal = Decimal("0")) -> Decimal:
    try:
        number = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return default
    return number if number.is_finite() else default


def money(value: Decimal) -> float:
    """JSON-friendly amount rounded to paise."""
    return float(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


def item_product_id(item: Dict[str, Any]) -> Optional[str]:
    """Line items from different clients name the product ``product_id``, ``_id`` or ``id``."""
    for key in ("product_id", "_id", "id"):
        if item.get(key):
            return str(item[key])
    return None


def products_by_id(product_ids: Iterable[str], fields=("id", "category")) -> Dict[str, Product]:
    """Bulk-load products; identifiers that are not UUIDs are ignored."""
    valid_ids = []
    for product_id in set(product_ids):
        try:
            Product._meta.pk.to_python(product_id)
            valid_ids.append(product_id)
        except DjangoValidationError:
            continue
    return {str(p.pk): p for p in Product.objects.filter(pk__in=valid_ids).only(*fields)}


class CommissionService(BaseService):
    def get_commission_map(self) -> Dict[str, Decimal]:
        return {row.category: row.commission_percent for row in CategoryCommission.objects.all()}

    def percent_for(self, category: Optional[str], commission_map: Optional[Dict[str, Decimal]] = None) -> Decimal:
        if commission_map is None:
            commission_map = self.get_commission_map()
        if not category:
            return DEFAULT_COMMISSION_PERCENT
        return commission_map.get(normalize_category(category), DEFAULT_COMMISSION_PERCENT)

    def build_order_items(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Line items with commission and seller payout.

        commission = price x qty x pct / 100; payout = price x qty - commission.
        The commission map and product categories are loaded once per order.
        """
        commission_map = self.get_commission_map()
        products = products_by_id(pid for pid in (item_product_id(i) for i in items) if pid)

        result = []
        for item in items:
            product_id = item_product_id(item)
            quantity = to_decimal(item.get("quantity"))
            price = to_decimal(item.get("price"))
            product = products.get(product_id) if product_id else None
            pct = self.percent_for(product.category, commission_map) if product else DEFAULT_COMMISSION_PERCENT

            gross = price * quantity
            commission = gross * pct / 100
            size = item.get("size") if item.get("size") is not None else item.get("selected_size")
            color = item.get("color") if item.get("color") is not None else item.get("selected_color")
            result.append(
                {
                    "product_id": product_id,
                    "name": str(item.get("name") or "")[:200],
                    "quantity": int(quantity) if quantity == quantity.to_integral_value() else float(quantity),
                    "price": float(price),
                    "size": size,
                    "color": color,
                    "image": str(item["image"])[:500] if item.get("image") else None,
                    "commission_percent": float(pct),
                    "commission_amount": money(commission),
                    "seller_payout_amount": money(gross - commission),
                }
            )
        return result

    # ------------------------------------------------------------------
    # Admin and seller views of the table
    # ------------------------------------------------------------------

    def list_commissions(self) -> List[Dict[str, Any]]:
        commission_map = self.get_commission_map()
        return [
            {
                "category": category,
                "commission_percent": float(commission_map.get(category, DEFAULT_COMMISSION_PERCENT)),
            }
            for category in CATEGORIES
        ]

    def get_category_commission(self, category: str) -> ServiceResult[Dict[str, Any]]:
        normalized = normalize_category(category)
        if not is_valid_category(normalized):
            return service_err(ErrorCodes.INVALID_CATEGORY, "Invalid category")
        return service_ok({"category": normalized, "commission_percent": float(self.percent_for(normalized))})

    @BaseService.log_performance
    def set_commission(self, category: str, percent, user=None) -> ServiceResult[CategoryCommission]:
        normalized = normalize_category(category)
        if not is_valid_category(normalized):
            return service_err(ErrorCodes.INVALID_CATEGORY, "Invalid category")
        if isinstance(percent, bool):
            return service_err(ErrorCodes.VALIDATION_ERROR, "Commission percent must be a number")
        value = to_decimal(percent, default=None)
        if value is None:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Commission percent must be a number")
        if value < 0 or value > 100:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Commission percent must be between 0 and 100")

        commission, _ = CategoryCommission.objects.update_or_create(
            category=normalized, defaults={"commission_percent": value, "updated_by": user}
        )
        self.logger.info(f"Commission for {normalized} set to {value}%")
        return service_ok(commission)
