from django.urls import path

from notifications.api import views

app_name = "notifications"

urlpatterns = [
    path("", views.NotificationCreateView.as_view(), name="create"),
    path("admin/", views.AdminNotificationListView.as_view(), name="admin_list"),
    path("admin/unread-count/", views.AdminUnreadCountView.as_view(), name="admin_unread_count"),
    path("admin/mark-all-read/", views.AdminMarkAllReadView.as_view(), name="admin_mark_all_read"),
    path("admin/clear-read/", views.AdminClearReadView.as_view(), name="admin_clear_read"),
    path("seller/", views.SellerNotificationListView.as_view(), name="seller_list"),
    path("seller/unread-count/", views.SellerUnreadCountView.as_view(), name="seller_unread_count"),
    path("seller/mark-all-read/", views.SellerMarkAllReadView.as_view(), name="seller_mark_all_read"),
    path("seller/clear-read/", views.SellerClearReadView.as_view(), name="seller_clear_read"),
    path("<uuid:notification_id>/read/", views.NotificationMarkReadView.as_view(), name="mark_read"),
    path("<uuid:notification_id>/", views.NotificationDeleteView.as_view(), name="delete"),
]
