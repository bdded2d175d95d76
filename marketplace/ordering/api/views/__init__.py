from .order_views import (
    MyOrdersView,
    OrderByOrderIdView,
    OrderByPaymentIdView,
    OrderCancelView,
    OrderListCreateView,
    OrderStatusUpdateView,
)

__all__ = [
    "MyOrdersView",
    "OrderByOrderIdView",
    "OrderByPaymentIdView",
    "OrderCancelView",
    "OrderListCreateView",
    "OrderStatusUpdateView",
]
