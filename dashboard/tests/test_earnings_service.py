from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

import pytest
from django.test import TestCase
from django.utils import timezone

from dashboard.domain.models import AdminEarning, SellerEarning
from dashboard.domain.services.earnings_service import (
    EarningsService,
    admin_item_amount,
    build_buckets,
    classify,
    seller_item_amount,
    summarize,
)
from infrastructure.container import container
from marketplace.tests.factories import OrderFactory, ProductFactory, SellerFactory, order_item

# A Wednesday
NOW = datetime(2024, 3, 13, 15, 30, tzinfo=dt_timezone.utc)


@pytest.mark.unit
class TestBuckets:
    def test_weeks_start_on_monday(self):
        buckets = build_buckets("week", {"weeks": 3}, now=NOW)

        assert [label for label, _, _ in buckets] == [
            "2024-03-11 - 2024-03-17",
            "2024-03-04 - 2024-03-10",
            "2024-02-26 - 2024-03-03",
        ]
        label, start, end = buckets[0]
        assert start.weekday() == 0
        assert end - start == timedelta(days=7)

    def test_months_cross_year_boundary(self):
        buckets = build_buckets("month", {"months": 4}, now=NOW)

        assert [label for label, _, _ in buckets] == ["Mar 2024", "Feb 2024", "Jan 2024", "Dec 2023"]
        assert buckets[1][1] == datetime(2024, 2, 1, tzinfo=buckets[1][1].tzinfo)
        assert buckets[1][2] == datetime(2024, 3, 1, tzinfo=buckets[1][2].tzinfo)

    def test_years(self):
        buckets = build_buckets("year", {"years": 2}, now=NOW)
        assert [label for label, _, _ in buckets] == ["2024", "2023"]


@pytest.mark.unit
class TestAmounts:
    def test_classify(self):
        assert classify("delivered") == "earned"
        assert classify("cancelled") == "cancelled"
        assert classify("shipped") == "upcoming"
        assert classify("pending") == "upcoming"

    def test_admin_amount_prefers_stored_commission(self):
        assert admin_item_amount({"commission_amount": 12.5, "price": 100, "quantity": 1}) == Decimal("12.5")

    def test_admin_amount_falls_back_to_percent(self):
        item = {"price": 200, "quantity": 2, "commission_percent": 10}
        assert admin_item_amount(item) == Decimal("40")

    def test_admin_amount_uses_default_percent(self):
        assert admin_item_amount({"price": 100, "quantity": 1}) == Decimal("2")

    def test_seller_amount(self):
        assert seller_item_amount({"seller_payout_amount": 90, "price": 100, "quantity": 1}) == Decimal("90")
        assert seller_item_amount({"price": 100, "quantity": 1, "commission_percent": 5}) == Decimal("95")


@pytest.mark.unit
class TestSummarize:
    def test_totals_and_breakdown(self):
        buckets = build_buckets("week", {"weeks": 2}, now=NOW)
        entries = [
            (NOW - timedelta(days=1), "delivered", Decimal("10")),
            (NOW - timedelta(days=8), "cancelled", Decimal("4")),
            (NOW - timedelta(days=2), "processing", Decimal("6")),
            (NOW - timedelta(days=60), "delivered", Decimal("100")),
            (NOW, "delivered", Decimal("0")),
        ]

        summary = summarize(entries, buckets)

        assert summary["totals"] == {"earned": 110.0, "upcoming": 6.0, "cancelled": 4.0, "orders_count": 4}
        current, previous = summary["breakdown"]
        assert (current["earned"], current["upcoming"], current["count"]) == (10.0, 6.0, 2)
        assert (previous["cancelled"], previous["count"]) == (4.0, 1)


@pytest.mark.unit
class TestNormalizeParams:
    def test_defaults(self):
        assert EarningsService.normalize_params() == ("month", {"weeks": 8, "months": 12, "years": 3})

    def test_invalid_range_and_values(self):
        range_name, params = EarningsService.normalize_params("decade", weeks="abc", months="0", years="5")

        assert range_name == "month"
        assert params == {"weeks": 8, "months": 1, "years": 5}

    def test_values_are_capped(self):
        _, params = EarningsService.normalize_params("year", weeks="99999999", months="30000", years="2100")

        assert params == {"weeks": 520, "months": 240, "years": 50}

    def test_range_is_case_insensitive(self):
        assert EarningsService.normalize_params(" WEEK ")[0] == "week"


class EarningsServiceTest(TestCase):
    def setUp(self):
        self.service = container.earnings_service()
        self.seller = SellerFactory()
        self.product = ProductFactory(seller=self.seller, price=Decimal("100"))
        self.other = ProductFactory(price=Decimal("50"))

    def test_admin_earnings_persists_snapshot(self):
        OrderFactory(
            status="delivered",
            items=[order_item(self.product, commission_percent=10.0, commission_amount=10.0)],
        )
        OrderFactory(status="pending", items=[order_item(self.other, quantity=2)])

        earnings = self.service.admin_earnings(range_name="year", years=1)

        self.assertEqual(earnings["total_earned"], 10.0)
        self.assertEqual(earnings["total_upcoming"], 2.0)
        self.assertEqual(earnings["orders_count"], 2)
        self.assertEqual(earnings["breakdown"][0]["label"], str(timezone.now().year))
        snapshot = AdminEarning.objects.get()
        self.assertEqual(snapshot.range, "year")
        self.assertEqual(snapshot.params, {"weeks": 8, "months": 12, "years": 1})

    def test_seller_earnings_only_count_own_items(self):
        OrderFactory(
            status="delivered",
            items=[order_item(self.product, quantity=2), order_item(self.other, quantity=3)],
        )
        OrderFactory(status="delivered", items=[order_item(self.other)])

        earnings = self.service.seller_earnings(self.seller, [self.product.id], range_name="week")

        self.assertEqual(earnings["total_earned"], 196.0)
        self.assertEqual(earnings["orders_count"], 1)
        self.assertEqual(len(earnings["breakdown"]), 8)
        self.assertEqual(SellerEarning.objects.filter(seller=self.seller).count(), 1)
