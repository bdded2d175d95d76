from .notification_views import (
    AdminClearReadView,
    AdminMarkAllReadView,
    AdminNotificationListView,
    AdminUnreadCountView,
    NotificationCreateView,
    NotificationDeleteView,
    NotificationMarkReadView,
    SellerClearReadView,
    SellerMarkAllReadView,
    SellerNotificationListView,
    SellerUnreadCountView,
)

__all__ = [
    "AdminClearReadView",
    "AdminMarkAllReadView",
    "AdminNotificationListView",
    "AdminUnreadCountView",
    "NotificationCreateView",
    "NotificationDeleteView",
    "NotificationMarkReadView",
    "SellerClearReadView",
    "SellerMarkAllReadView",
    "SellerNotificationListView",
    "SellerUnreadCountView",
]
