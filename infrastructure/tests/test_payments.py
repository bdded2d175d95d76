"""
Payment Infrastructure Tests
==============================

Unit tests for the payment provider abstraction layer.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import stripe
from django.test import TestCase, override_settings
from razorpay.errors import BadRequestError, SignatureVerificationError

from infrastructure.payments import (
    GatewayOrder,
    MockPaymentProvider,
    PaymentException,
    PaymentFactory,
    PaymentProviderInterface,
    PaymentStatus,
    RazorpayProvider,
    StripeProvider,
)


class PaymentInterfaceTest(TestCase):
    """Test PaymentProviderInterface contract."""

    def test_interface_is_abstract(self):
        """PaymentProviderInterface should not be instantiable."""
        with self.assertRaises(TypeError):
            PaymentProviderInterface()

    def test_validate_identifiers(self):
        """Identifier shapes are checked in order: order, payment, signature."""
        provider = MockPaymentProvider()
        good_order, good_payment, good_signature = "order_ABCDEFGHIJ12", "pay_ABCDEFGHIJ12", "a" * 64

        self.assertIsNone(provider.validate_identifiers(good_order, good_payment, good_signature))
        self.assertEqual(provider.validate_identifiers("ord_1", good_payment, good_signature), "Invalid order ID format")
        self.assertEqual(provider.validate_identifiers(good_order, "pay_1", good_signature), "Invalid payment ID format")
        self.assertEqual(provider.validate_identifiers(good_order, good_payment, "XYZ"), "Invalid signature format")


class RazorpayProviderTest(TestCase):
    """Test RazorpayProvider with a mocked SDK client."""

    def setUp(self):
        self.client = MagicMock()
        self.provider = RazorpayProvider(key_id="rzp_test_key", key_secret="secret", client=self.client)

    def test_create_order(self):
        """Orders are created in paise with an upper-case currency."""
        self.client.order.create.return_value = {
            "id": "order_NX12345678",
            "amount": 49900,
            "currency": "INR",
            "receipt": "receipt_1",
            "status": "created",
        }

        order = self.provider.create_order(49900, "inr", "receipt_1", {"items": 2})

        self.assertIsInstance(order, GatewayOrder)
        self.assertEqual(order.id, "order_NX12345678")
        self.assertEqual(order.amount, 49900)
        self.client.order.create.assert_called_once_with(
            data={"amount": 49900, "currency": "INR", "receipt": "receipt_1", "notes": {"items": 2}}
        )

    def test_create_order_error(self):
        """SDK errors are wrapped in PaymentException."""
        self.client.order.create.side_effect = BadRequestError("amount too small")

        with self.assertRaises(PaymentException):
            self.provider.create_order(10, "INR", "receipt_1")

    def test_fetch_payment(self):
        self.client.payment.fetch.return_value = {
            "id": "pay_NX12345678",
            "status": "captured",
            "amount": 49900,
            "currency": "INR",
            "method": "upi",
            "order_id": "order_NX12345678",
        }

        payment = self.provider.fetch_payment("pay_NX12345678")

        self.assertEqual(payment.status, PaymentStatus.CAPTURED.value)
        self.assertEqual(payment.method, "upi")
        self.assertEqual(payment.order_id, "order_NX12345678")

    def test_fetch_payment_error(self):
        self.client.payment.fetch.side_effect = BadRequestError("The id provided does not exist")

        with self.assertRaises(PaymentException):
            self.provider.fetch_payment("pay_NX12345678")

    def test_verify_signature(self):
        """A valid signature passes; a mismatch returns False instead of raising."""
        self.client.utility.verify_payment_signature.return_value = True
        self.assertTrue(self.provider.verify_payment_signature("order_1", "pay_1", "sig"))

        self.client.utility.verify_payment_signature.side_effect = SignatureVerificationError("mismatch")
        self.assertFalse(self.provider.verify_payment_signature("order_1", "pay_1", "sig"))

    def test_not_configured(self):
        """Missing credentials disable the provider."""
        provider = RazorpayProvider(key_id="", key_secret="", client=MagicMock())

        self.assertFalse(provider.is_configured())
        self.assertFalse(provider.verify_payment_signature("order_1", "pay_1", "sig"))
        with self.assertRaises(PaymentException):
            provider.create_order(100, "INR", "receipt_1")


class MockPaymentProviderTest(TestCase):
    """Test the in-memory gateway used by the suite."""

    def setUp(self):
        self.provider = MockPaymentProvider(key_secret="test_secret")

    def test_signatures_are_hmac_sha256(self):
        payment_id = self.provider.new_payment_id()
        signature = self.provider.sign("order_ABCDEFGHIJ12", payment_id)

        self.assertEqual(len(signature), 64)
        self.assertTrue(self.provider.verify_payment_signature("order_ABCDEFGHIJ12", payment_id, signature))
        self.assertFalse(self.provider.verify_payment_signature("order_OTHERORDER12", payment_id, signature))
        self.assertIsNone(self.provider.validate_identifiers("order_ABCDEFGHIJ12", payment_id, signature))

    def test_registered_payments(self):
        self.provider.register_payment("pay_ABCDEFGHIJ12", 1000, status=PaymentStatus.AUTHORIZED.value)

        self.assertEqual(self.provider.fetch_payment("pay_ABCDEFGHIJ12").status, "authorized")
        with self.assertRaises(PaymentException):
            self.provider.fetch_payment("pay_UNKNOWN12345")

    def test_reset(self):
        self.provider.create_order(100, "inr", "r1")
        self.provider.fail_fetch = True

        self.provider.reset()

        self.assertEqual(self.provider.orders, {})
        self.assertFalse(self.provider.fail_fetch)


@override_settings(STRIPE_SECRET_KEY="sk_test_fake", STRIPE_PUBLISHABLE_KEY="pk_test_fake")
class StripeProviderTest(TestCase):
    """Test StripeProvider against mocked PaymentIntents."""

    def setUp(self):
        self.provider = StripeProvider()

    @patch("stripe.PaymentIntent.create")
    def test_create_order(self, mock_create):
        """Notes become string metadata with the receipt attached."""
        mock_create.return_value = SimpleNamespace(
            id="pi_3NxABCDEFGHIJ",
            amount=49900,
            currency="inr",
            status="requires_payment_method",
            client_secret="pi_3NxABCDEFGHIJ_secret_KLMNOPQRSTUV",
        )

        order = self.provider.create_order(49900, "INR", "receipt_1", {"items": 2})

        self.assertEqual(order.currency, "INR")
        self.assertEqual(order.client_secret, "pi_3NxABCDEFGHIJ_secret_KLMNOPQRSTUV")
        self.assertEqual(order.notes, {"items": "2", "receipt": "receipt_1"})
        self.assertEqual(mock_create.call_args.kwargs["currency"], "inr")
        self.assertEqual(self.provider.public_key, "pk_test_fake")

    @patch("stripe.PaymentIntent.create")
    def test_create_order_error(self, mock_create):
        mock_create.side_effect = stripe.InvalidRequestError("bad amount", param="amount")

        with self.assertRaises(PaymentException):
            self.provider.create_order(1, "INR", "receipt_1")

    @patch("stripe.PaymentIntent.retrieve")
    def test_verify_signature(self, mock_retrieve):
        """The client secret acts as signature and the charge must belong to the intent."""
        mock_retrieve.return_value = SimpleNamespace(client_secret="pi_1_secret_x", latest_charge="ch_ABCDEFGHIJ12")

        self.assertTrue(self.provider.verify_payment_signature("pi_1", "ch_ABCDEFGHIJ12", "pi_1_secret_x"))
        self.assertFalse(self.provider.verify_payment_signature("pi_1", "ch_OTHERCHARGE1", "pi_1_secret_x"))
        self.assertFalse(self.provider.verify_payment_signature("pi_1", "ch_ABCDEFGHIJ12", "wrong"))

    @patch("stripe.Charge.retrieve")
    def test_fetch_payment_maps_status(self, mock_retrieve):
        mock_retrieve.return_value = SimpleNamespace(
            id="ch_ABCDEFGHIJ12",
            status="succeeded",
            captured=True,
            refunded=False,
            amount=49900,
            currency="inr",
            created=1700000000,
            payment_intent="pi_1",
            payment_method_details=SimpleNamespace(type="card"),
        )

        payment = self.provider.fetch_payment("ch_ABCDEFGHIJ12")

        self.assertEqual(payment.status, PaymentStatus.CAPTURED.value)
        self.assertEqual(payment.method, "card")
        self.assertEqual(payment.order_id, "pi_1")


class PaymentFactoryTest(TestCase):
    """Test PaymentFactory provider selection."""

    def test_create_mock(self):
        self.assertIsInstance(PaymentFactory.create("mock"), MockPaymentProvider)

    @override_settings(RAZORPAY_KEY_ID="", RAZORPAY_KEY_SECRET="")
    def test_create_razorpay_without_credentials(self):
        provider = PaymentFactory.create("razorpay")

        self.assertIsInstance(provider, RazorpayProvider)
        self.assertFalse(provider.is_configured())

    def test_invalid_provider(self):
        with self.assertRaises(ValueError) as ctx:
            PaymentFactory.create("paypal")

        self.assertIn("Invalid payment provider", str(ctx.exception))
