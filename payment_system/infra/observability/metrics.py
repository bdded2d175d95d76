from prometheus_client import Counter

payment_orders_total = Counter(
    "payment_orders_total", "Gateway orders opened for checkout", ["currency", "status"]
)

payment_verifications_total = Counter(
    "payment_verifications_total", "Checkout callbacks verified", ["result"]
)
