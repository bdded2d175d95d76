from decimal import Decimal

from django.test import TestCase

from infrastructure.container import container
from marketplace.tests.factories import OrderFactory, ProductFactory, SellerFactory, order_item
from utils.service_base import ErrorCodes


class SellerPortalServiceTest(TestCase):
    def setUp(self):
        self.service = container.seller_portal_service()
        self.seller = SellerFactory()
        self.user = self.seller.user
        self.own_product = ProductFactory(seller=self.seller, created_by=self.user, price=Decimal("100"))
        self.legacy_product = ProductFactory(created_by=self.user, price=Decimal("50"))
        self.foreign_product = ProductFactory(price=Decimal("999"))

    def test_list_products_covers_seller_and_creator(self):
        page = self.service.list_products(self.user, self.seller, {})

        self.assertEqual(page["pagination"]["total"], 2)
        self.assertEqual({p.pk for p in page["data"]}, {self.own_product.pk, self.legacy_product.pk})

    def test_list_products_filters(self):
        self.legacy_product.is_active = False
        self.legacy_product.save()

        page = self.service.list_products(self.user, self.seller, {"is_active": False})

        self.assertEqual([p.pk for p in page["data"]], [self.legacy_product.pk])

    def test_toggle_own_product(self):
        result = self.service.toggle_product(self.own_product.pk, self.user, self.seller)

        self.assertTrue(result.ok)
        self.assertFalse(result.value.is_active)

    def test_toggle_foreign_product(self):
        result = self.service.toggle_product(self.foreign_product.pk, self.user, self.seller)
        self.assertEqual(result.error, ErrorCodes.PERMISSION_DENIED)

    def test_order_payload_keeps_only_seller_items(self):
        order = OrderFactory(
            items=[
                order_item(self.own_product, quantity=2),
                order_item(self.legacy_product, quantity=1),
                order_item(self.foreign_product, quantity=4),
            ]
        )

        payload = self.service.order_payload(order, {str(self.own_product.id), str(self.legacy_product.id)})

        self.assertEqual(payload["item_count"], 2)
        self.assertEqual(payload["total_quantity"], 3)
        self.assertEqual(payload["seller_total"], 250.0)
        self.assertEqual(payload["customer_info"]["name"], order.customer_name)

    def test_recent_orders_summary(self):
        OrderFactory(status="pending", items=[order_item(self.own_product)])
        OrderFactory(status="delivered", items=[order_item(self.legacy_product)])
        OrderFactory(status="delivered", items=[order_item(self.foreign_product)])

        recent = self.service.recent_orders(self.user, self.seller)

        self.assertEqual(len(recent["data"]), 2)
        self.assertEqual(recent["summary"]["total"], 2)
        self.assertEqual(recent["summary"]["pending"], 1)
        self.assertEqual(recent["summary"]["delivered"], 1)
        self.assertEqual(recent["summary"]["cancelled"], 0)

    def test_order_detail_requires_seller_item(self):
        order = OrderFactory(items=[order_item(self.foreign_product)])

        result = self.service.order_detail(order.pk, self.user, self.seller)

        self.assertEqual(result.error, ErrorCodes.PERMISSION_DENIED)

    def test_update_order_status(self):
        order = OrderFactory(status="processing", items=[order_item(self.own_product)])

        result = self.service.update_order_status(order.pk, "shipped", self.user, self.seller)

        self.assertTrue(result.ok)
        order.refresh_from_db()
        self.assertEqual(order.status, "shipped")

    def test_update_order_status_rejects_unknown_status(self):
        order = OrderFactory(items=[order_item(self.own_product)])
        result = self.service.update_order_status(order.pk, "returned", self.user, self.seller)
        self.assertEqual(result.error, ErrorCodes.INVALID_STATUS)

    def test_list_orders_filters_by_status(self):
        OrderFactory(status="pending", items=[order_item(self.own_product)])
        OrderFactory(status="shipped", items=[order_item(self.own_product)])

        page = self.service.list_orders(self.user, self.seller, status="shipped")

        self.assertEqual(page["pagination"]["total"], 1)
        self.assertEqual(page["data"][0]["order"].status, "shipped")
