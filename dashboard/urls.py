from django.urls import path

from dashboard.api import views

app_name = "dashboard"

urlpatterns = [
    path("stats/", views.StatsView.as_view(), name="stats"),
    path("customers/", views.CustomerListView.as_view(), name="customers"),
    path("orders/", views.OrderListView.as_view(), name="orders"),
    path("orders/all/", views.OrderDeleteAllView.as_view(), name="orders_delete_all"),
    path("orders/<uuid:pk>/status/", views.OrderStatusView.as_view(), name="order_status"),
    path("sellers/", views.SellerListView.as_view(), name="sellers"),
    path("sellers/<uuid:seller_id>/", views.SellerDetailView.as_view(), name="seller_detail"),
    path(
        "sellers/<uuid:seller_id>/verification/",
        views.SellerVerificationReviewView.as_view(),
        name="seller_verification",
    ),
    path("earnings/", views.EarningsView.as_view(), name="earnings"),
    path("commissions/", views.CommissionListView.as_view(), name="commissions"),
    path("commissions/<str:category>/", views.CommissionUpdateView.as_view(), name="commission_update"),
]
