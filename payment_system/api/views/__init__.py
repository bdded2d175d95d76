from .payment_views import create_payment_order, payment_status, verify_payment

__all__ = ["create_payment_order", "payment_status", "verify_payment"]
