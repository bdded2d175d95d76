from decimal import Decimal

from django.test import TestCase

from infrastructure.container import container
from marketplace.tests.factories import OrderFactory, SellerFactory, UserFactory
from utils.formatting import format_inr


class MailerServiceTest(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.mailer = container.mailer()
        self.email = container.email()

    def test_password_reset(self):
        user = UserFactory(email="asha@example.com", name="Asha")

        sent = self.mailer.send_password_reset(user, "http://frontend.test/reset-password?token=abc")

        self.assertTrue(sent)
        message = self.email.get_last_message()
        self.assertEqual(message.subject, "Reset your L-Mart password")
        self.assertEqual(message.to, ["asha@example.com"])
        self.assertIn("http://frontend.test/reset-password?token=abc", message.html_body)
        self.assertIn("Asha", message.html_body)

    def test_new_seller_alert_goes_to_admin(self):
        seller = SellerFactory(seller_name="Asha Prints")

        self.mailer.send_new_seller_alert(seller)

        message = self.email.get_last_message()
        self.assertEqual(message.subject, "New Seller Registration - Action Required")
        self.assertEqual(message.to, ["admin-alerts@lmart.test"])
        self.assertIn("Asha Prints", message.html_body)

    def test_new_order_alert(self):
        order = OrderFactory(
            order_id="ORD1700000000555",
            total=Decimal("123456.00"),
            items=[{"name": "Mug", "quantity": 2, "price": 61728.0, "commission_amount": 1234.56}],
        )

        self.mailer.send_new_order_alert(order)

        message = self.email.get_last_message()
        self.assertEqual(message.subject, "New Order Received - ORD1700000000555 (₹1,23,456.00)")
        self.assertIn("Mug", message.html_body)
        self.assertIn("₹1,234.56", message.html_body)

    def test_order_status_update(self):
        order = OrderFactory(order_id="ORD9", status="shipped", customer_email="buyer@example.com")

        self.mailer.send_order_status_update(order, "processing")

        message = self.email.messages_to("buyer@example.com")[0]
        self.assertEqual(message.subject, "Order Shipped - ORD9")
        self.assertIn("Your order has been shipped", message.html_body)

    def test_no_recipient_is_skipped(self):
        order = OrderFactory(customer_email="")

        self.assertFalse(self.mailer.send_order_status_update(order, "pending"))
        self.assertEqual(self.email.sent_messages, [])

    def test_unconfigured_backend_drops_mail(self):
        self.email.configured = False
        user = UserFactory()

        self.mailer.send_password_reset(user, "http://frontend.test/reset")

        self.assertFalse(self.mailer.is_configured())
        self.assertEqual(self.email.sent_messages, [])


class FormatInrTest(TestCase):
    def test_grouping(self):
        self.assertEqual(format_inr(0), "₹0.00")
        self.assertEqual(format_inr("999.5"), "₹999.50")
        self.assertEqual(format_inr(1000), "₹1,000.00")
        self.assertEqual(format_inr(Decimal("12345678.9")), "₹1,23,45,678.90")
        self.assertEqual(format_inr(-1500), "-₹1,500.00")
