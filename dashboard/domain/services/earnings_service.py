"""
EarningsService - admin commission and seller payout summaries.

Orders are classified by status: ``delivered`` is earned, ``cancelled`` is
cancelled, everything else is upcoming. Orders contributing 0 or less are
ignored. Buckets run newest first; weeks start on Monday.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from django.utils import timezone

from dashboard.domain.models import AdminEarning, SellerEarning
from marketplace.ordering.domain.models import DEFAULT_COMMISSION_PERCENT, Order
from marketplace.ordering.domain.services.commission_service import to_decimal
from utils.service_base import BaseService

RANGES = ("week", "month", "year")
DEFAULT_PARAMS = {"weeks": 8, "months": 12, "years": 3}
MAX_PARAMS = {"weeks": 520, "months": 240, "years": 50}

Bucket = Tuple[str, datetime, datetime]


def _gross(item) -> Decimal:
    return to_decimal(item.get("price")) * to_decimal(item.get("quantity"))


def _percent(item) -> Decimal:
    pct = to_decimal(item.get("commission_percent"))
    return pct if pct > 0 else DEFAULT_COMMISSION_PERCENT


def admin_item_amount(item) -> Decimal:
    """Stored commission when positive, otherwise price x qty x pct / 100."""
    stored = to_decimal(item.get("commission_amount"))
    if stored > 0:
        return stored
    return _gross(item) * _percent(item) / 100


def seller_item_amount(item) -> Decimal:
    """Stored payout when positive, otherwise price x qty x (1 - pct / 100)."""
    stored = to_decimal(item.get("seller_payout_amount"))
    if stored > 0:
        return stored
    return _gross(item) * (1 - _percent(item) / 100)


def _add_months(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def build_buckets(range_name: str, params: Dict[str, int], now: Optional[datetime] = None) -> List[Bucket]:
    """``(label, from, to)`` periods, newest first, in the current timezone."""
    now = timezone.localtime(now or timezone.now())
    tz = now.tzinfo
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    buckets: List[Bucket] = []

    if range_name == "week":
        end = today - timedelta(days=today.weekday()) + timedelta(days=7)
        for _ in range(params["weeks"]):
            start = end - timedelta(days=7)
            last_day = end - timedelta(days=1)
            buckets.append((f"{start:%Y-%m-%d} - {last_day:%Y-%m-%d}", start, end))
            end = start
    elif range_name == "year":
        for offset in range(params["years"]):
            year = now.year - offset
            buckets.append((str(year), datetime(year, 1, 1, tzinfo=tz), datetime(year + 1, 1, 1, tzinfo=tz)))
    else:
        for offset in range(params["months"]):
            year, month = _add_months(now.year, now.month, -offset)
            next_year, next_month = _add_months(year, month, 1)
            start = datetime(year, month, 1, tzinfo=tz)
            buckets.append((f"{start:%b %Y}", start, datetime(next_year, next_month, 1, tzinfo=tz)))
    return buckets


def classify(status: str) -> str:
    if status == "delivered":
        return "earned"
    if status == "cancelled":
        return "cancelled"
    return "upcoming"


def summarize(entries: Iterable[Tuple[datetime, str, Decimal]], buckets: List[Bucket]) -> Dict[str, Any]:
    """
    Totals and per-bucket breakdown for ``(created_at, status, amount)`` entries.
    """
    entries = [(created, status, amount) for created, status, amount in entries if amount > 0]
    totals = {"earned": Decimal("0"), "upcoming": Decimal("0"), "cancelled": Decimal("0")}
    for _, status, amount in entries:
        totals[classify(status)] += amount

    breakdown = []
    for label, start, end in buckets:
        bucket = {"earned": Decimal("0"), "upcoming": Decimal("0"), "cancelled": Decimal("0")}
        count = 0
        for created, status, amount in entries:
            if start <= created < end:
                bucket[classify(status)] += amount
                count += 1
        breakdown.append(
            {
                "label": label,
                "earned": round(float(bucket["earned"]), 2),
                "upcoming": round(float(bucket["upcoming"]), 2),
                "cancelled": round(float(bucket["cancelled"]), 2),
                "count": count,
                "from": start.isoformat(),
                "to": end.isoformat(),
            }
        )

    return {
        "totals": {
            "earned": round(float(totals["earned"]), 2),
            "upcoming": round(float(totals["upcoming"]), 2),
            "cancelled": round(float(totals["cancelled"]), 2),
            "orders_count": len(entries),
        },
        "breakdown": breakdown,
    }


class EarningsService(BaseService):
    @staticmethod
    def normalize_params(range_name=None, weeks=None, months=None, years=None) -> Tuple[str, Dict[str, int]]:
        range_name = str(range_name or "month").strip().lower()
        if range_name not in RANGES:
            range_name = "month"
        params = {}
        for key, raw in (("weeks", weeks), ("months", months), ("years", years)):
            try:
                params[key] = min(max(1, int(raw)), MAX_PARAMS[key])
            except (TypeError, ValueError):
                params[key] = DEFAULT_PARAMS[key]
        return range_name, params

    def _compute(self, orders, amount_for: Callable, range_name, params, now=None) -> Dict[str, Any]:
        entries = [
            (order.created_at, order.status, sum((amount_for(item) for item in order.items or []), Decimal("0")))
            for order in orders
        ]
        return summarize(entries, build_buckets(range_name, params, now))

    @staticmethod
    def _response(summary: Dict[str, Any]) -> Dict[str, Any]:
        totals = summary["totals"]
        return {
            "total_earned": totals["earned"],
            "total_upcoming": totals["upcoming"],
            "total_cancelled": totals["cancelled"],
            "orders_count": totals["orders_count"],
            "breakdown": summary["breakdown"],
        }

    @BaseService.log_performance
    def admin_earnings(self, range_name=None, weeks=None, months=None, years=None, now=None) -> Dict[str, Any]:
        """Platform commission across all orders; a snapshot is stored best-effort."""
        range_name, params = self.normalize_params(range_name, weeks, months, years)
        summary = self._compute(Order.objects.order_by("-created_at"), admin_item_amount, range_name, params, now)
        try:
            AdminEarning.objects.create(range=range_name, params=params, **summary)
        except Exception as e:
            self.logger.warning(f"AdminEarning persist error: {e}")
        return self._response(summary)

    @BaseService.log_performance
    def seller_earnings(
        self, seller, product_ids, range_name=None, weeks=None, months=None, years=None, now=None
    ) -> Dict[str, Any]:
        """
        Payouts for the seller's own line items.

        Args:
            seller: Seller profile (snapshot owner)
            product_ids: Ids of the seller's products
        """
        range_name, params = self.normalize_params(range_name, weeks, months, years)
        product_ids = {str(pid) for pid in product_ids}

        def amount_for(item):
            if str(item.get("product_id")) not in product_ids:
                return Decimal("0")
            return seller_item_amount(item)

        orders = [o for o in Order.objects.order_by("-created_at") if o.product_ids & product_ids]
        summary = self._compute(orders, amount_for, range_name, params, now)
        try:
            SellerEarning.objects.create(seller=seller, range=range_name, params=params, **summary)
        except Exception as e:
            self.logger.warning(f"SellerEarning persist error for seller {seller.pk}: {e}")
        return self._response(summary)
