from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketplace.models import Order
from marketplace.tests.factories import OrderFactory, ProductFactory, order_item


class CreatePaymentOrderViewTest(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.url = reverse("payment_system:create_order")
        self.product = ProductFactory(price=Decimal("250.00"), stock_quantity=5)

    def payload(self, **overrides):
        data = {
            "amount": 500,
            "currency": "INR",
            "customer_info": {"name": "Ravi", "email": "ravi@example.com", "phone": "9876543210"},
            "items": [{"id": str(self.product.id), "name": self.product.name, "price": 250, "quantity": 2}],
        }
        data.update(overrides)
        return data

    def test_creates_gateway_order(self):
        response = self.client.post(self.url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["order"]["amount"], 50000)
        self.assertEqual(response.data["order"]["currency"], "INR")
        self.assertTrue(response.data["order"]["id"].startswith("order_"))
        self.assertEqual(response.data["key"], container.payment().public_key)

    def test_validation_error(self):
        response = self.client.post(self.url, self.payload(currency="GBP"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"message": "Invalid currency. Only INR and USD are supported"})

    def test_stock_shortage_on_cart_lines(self):
        order_items = [order_item(self.product, quantity=9, price=Decimal("250.00"))]
        items = [{"id": str(self.product.id), "name": "Mug", "price": 2250, "quantity": 1}]

        response = self.client.post(
            self.url, self.payload(amount=2250, items=items, order_items=order_items), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Stock insufficient for some items")
        self.assertEqual(response.data["details"][0]["requested"], 9)

    def test_cart_lines_must_be_objects(self):
        response = self.client.post(self.url, self.payload(order_items=["abc"]), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"message": "Each order item must be an object"})

    def test_not_configured(self):
        container.payment().configured = False

        response = self.client.post(self.url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(
            response.data["message"], "Payment service not configured. Please contact administrator."
        )


class VerifyPaymentViewTest(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.url = reverse("payment_system:verify")
        self.gateway = container.payment()
        self.product = ProductFactory(price=Decimal("250.00"), stock_quantity=5, category="printing")
        self.gateway_order_id = self.gateway.create_order(amount=50000, currency="INR", receipt="receipt_1").id
        self.payment_id = self.gateway.new_payment_id()
        self.gateway.register_payment(self.payment_id, 50000, order_id=self.gateway_order_id)

    def callback(self, **overrides):
        data = {
            "gateway_order_id": self.gateway_order_id,
            "payment_id": self.payment_id,
            "signature": self.gateway.sign(self.gateway_order_id, self.payment_id),
            "customer_info": {"name": "Ravi", "email": "ravi@example.com", "phone": "98765 43210"},
            "items": [order_item(self.product, quantity=2)],
            "amount": 500,
        }
        data.update(overrides)
        return data

    def test_verified_payment_creates_order(self):
        response = self.client.post(self.url, self.callback(), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Payment verified and order created successfully")
        order = Order.objects.get(payment_id=self.payment_id)
        self.assertEqual(response.data["order"]["order_id"], order.order_id)
        self.assertEqual(order.payment_status, "completed")
        self.assertEqual(order.status, "pending")
        self.assertEqual(order.gateway_order_id, self.gateway_order_id)
        self.assertEqual(order.customer_phone, "9876543210")
        self.product.refresh_from_db()
        self.assertEqual(self.product.stock_quantity, 3)

    def test_verified_payment_sends_no_alerts(self):
        self.client.post(self.url, self.callback(), format="json")

        self.assertEqual(container.email().sent_messages, [])

    def test_duplicate_payment(self):
        OrderFactory(order_id="ORD1700000000001ABCD", payment_id=self.payment_id)

        response = self.client.post(self.url, self.callback(), format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data, {"message": "Payment already processed", "order_id": "ORD1700000000001ABCD"})

    def test_bad_signature(self):
        response = self.client.post(self.url, self.callback(signature="a" * 64), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Payment verification failed")
        self.assertFalse(Order.objects.exists())

    def test_payment_not_captured(self):
        self.gateway.register_payment(self.payment_id, 50000, status="failed")

        response = self.client.post(self.url, self.callback(), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Payment not captured. Status: failed")

    def test_amount_mismatch(self):
        response = self.client.post(self.url, self.callback(amount=450), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Amount mismatch with Razorpay records")

    def test_malformed_payment_id(self):
        response = self.client.post(self.url, self.callback(payment_id="pay_short"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid payment ID format")

    def test_items_must_be_objects(self):
        response = self.client.post(self.url, self.callback(items=["abc", 7]), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Each item must be an object")
        self.assertFalse(Order.objects.exists())


class PaymentStatusViewTest(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()

    def test_status(self):
        container.payment().register_payment("pay_StatusView001", 12345)

        response = self.client.get(reverse("payment_system:status", args=["pay_StatusView001"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["payment"]["status"], "captured")
        self.assertEqual(response.data["payment"]["amount"], 12345)

    def test_unknown_payment(self):
        response = self.client.get(reverse("payment_system:status", args=["pay_Unknown00001"]))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["message"], "Failed to fetch payment status")
