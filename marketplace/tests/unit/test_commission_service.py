from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from marketplace.ordering.domain.services.commission_service import (
    CommissionService,
    item_product_id,
    money,
    to_decimal,
)

PRODUCT_ID = "6f1c1f8e-7a0e-4f3e-9a55-2f1f3c0d9b11"


def product(category):
    mock = MagicMock()
    mock.category = category
    return mock


@pytest.mark.unit
class TestCommissionHelpers:
    def test_to_decimal(self):
        assert to_decimal("12.5") == Decimal("12.5")
        assert to_decimal("abc") == Decimal("0")
        assert to_decimal(None, default=None) is None
        assert to_decimal("Infinity") == Decimal("0")

    def test_money_rounds_half_up(self):
        assert money(Decimal("10.005")) == 10.01
        assert money(Decimal("3")) == 3.0

    def test_item_product_id_accepts_client_shapes(self):
        assert item_product_id({"product_id": "a"}) == "a"
        assert item_product_id({"_id": "b"}) == "b"
        assert item_product_id({"id": "c"}) == "c"
        assert item_product_id({"name": "x"}) is None


@pytest.mark.unit
class TestBuildOrderItems:
    def setup_method(self):
        self.service = CommissionService()

    @patch("marketplace.ordering.domain.services.commission_service.products_by_id")
    def test_uses_category_commission(self, mock_products):
        mock_products.return_value = {PRODUCT_ID: product("printing")}

        with patch.object(self.service, "get_commission_map", return_value={"printing": Decimal("10")}):
            items = self.service.build_order_items(
                [{"product_id": PRODUCT_ID, "name": "Visiting cards", "quantity": 2, "price": 250, "size": "A4"}]
            )

        assert items == [
            {
                "product_id": PRODUCT_ID,
                "name": "Visiting cards",
                "quantity": 2,
                "price": 250.0,
                "size": "A4",
                "color": None,
                "image": None,
                "commission_percent": 10.0,
                "commission_amount": 50.0,
                "seller_payout_amount": 450.0,
            }
        ]

    @patch("marketplace.ordering.domain.services.commission_service.products_by_id")
    def test_unknown_product_gets_default_commission(self, mock_products):
        mock_products.return_value = {}

        with patch.object(self.service, "get_commission_map", return_value={}):
            items = self.service.build_order_items([{"id": "missing", "name": "Mug", "quantity": 1, "price": 100}])

        assert items[0]["commission_percent"] == 2.0
        assert items[0]["commission_amount"] == 2.0
        assert items[0]["seller_payout_amount"] == 98.0

    @patch("marketplace.ordering.domain.services.commission_service.products_by_id")
    def test_category_without_row_uses_default(self, mock_products):
        mock_products.return_value = {PRODUCT_ID: product("news")}

        with patch.object(self.service, "get_commission_map", return_value={"printing": Decimal("10")}):
            items = self.service.build_order_items([{"_id": PRODUCT_ID, "quantity": 3, "price": 10}])

        assert items[0]["product_id"] == PRODUCT_ID
        assert items[0]["commission_percent"] == 2.0
        assert items[0]["commission_amount"] == 0.6
        assert items[0]["seller_payout_amount"] == 29.4

    @patch("marketplace.ordering.domain.services.commission_service.products_by_id")
    def test_selected_size_and_color_are_kept(self, mock_products):
        mock_products.return_value = {}

        with patch.object(self.service, "get_commission_map", return_value={}):
            items = self.service.build_order_items(
                [{"id": "x", "quantity": 1, "price": 5, "selected_size": "M", "selected_color": "red"}]
            )

        assert items[0]["size"] == "M"
        assert items[0]["color"] == "red"

    def test_percent_for_normalizes_aliases(self):
        commission_map = {"l-mart": Decimal("7")}
        assert self.service.percent_for("EMART", commission_map) == Decimal("7")
        assert self.service.percent_for(None, commission_map) == Decimal("2")
