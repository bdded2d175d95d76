from .dashboard_views import (
    CommissionListView,
    CommissionUpdateView,
    CustomerListView,
    EarningsView,
    OrderDeleteAllView,
    OrderListView,
    OrderStatusView,
    SellerDetailView,
    SellerListView,
    SellerVerificationReviewView,
    StatsView,
)


__all__ = [
    "StatsView",
    "CustomerListView",
    "OrderListView",
    "OrderDeleteAllView",
    "OrderStatusView",
    "SellerListView",
    "SellerDetailView",
    "SellerVerificationReviewView",
    "EarningsView",
    "CommissionListView",
    "CommissionUpdateView",
]
