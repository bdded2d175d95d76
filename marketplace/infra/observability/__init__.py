from .metrics import bulk_upload_rows_total, order_value, orders_created_total, stock_decrement_failures_total


__all__ = [
    "orders_created_total",
    "order_value",
    "stock_decrement_failures_total",
    "bulk_upload_rows_total",
]
