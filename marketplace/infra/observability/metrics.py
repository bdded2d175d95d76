from prometheus_client import Counter, Histogram


# Order Metrics
orders_created_total = Counter("lmart_orders_created_total", "Orders created", ["source"])
order_value = Histogram(
    "lmart_order_value_inr",
    "Order value distribution (INR)",
    buckets=[100, 500, 1000, 2500, 5000, 10000, 25000, 100000, float("inf")],
)

# Stock Metrics
stock_decrement_failures_total = Counter(
    "lmart_stock_decrement_failures_total", "Best-effort stock decrements that failed"
)

# Catalog Metrics
bulk_upload_rows_total = Counter("lmart_bulk_upload_rows_total", "Bulk upload rows processed", ["result"])
