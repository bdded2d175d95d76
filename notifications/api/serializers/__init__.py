from .notification_serializers import (
    BulkUpdateResponseSerializer,
    ErrorResponseSerializer,
    NotificationCreateSerializer,
    NotificationListResponseSerializer,
    NotificationSerializer,
    UnreadCountResponseSerializer,
)

__all__ = [
    "BulkUpdateResponseSerializer",
    "ErrorResponseSerializer",
    "NotificationCreateSerializer",
    "NotificationListResponseSerializer",
    "NotificationSerializer",
    "UnreadCountResponseSerializer",
]
