from .metrics import payment_orders_total, payment_verifications_total

__all__ = ["payment_orders_total", "payment_verifications_total"]
