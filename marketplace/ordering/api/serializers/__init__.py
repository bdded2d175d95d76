from .order_serializers import (
    CreateOrderRequestSerializer,
    OrderErrorResponseSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
)

__all__ = [
    "CreateOrderRequestSerializer",
    "OrderErrorResponseSerializer",
    "OrderSerializer",
    "OrderStatusUpdateSerializer",
]
