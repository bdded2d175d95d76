from .dashboard_serializers import (
    CommissionSerializer,
    CommissionUpdateRequestSerializer,
    DashboardOrderSerializer,
    ErrorResponseSerializer,
    OrderStatusRequestSerializer,
    SellerDetailSerializer,
    SellerUpdateRequestSerializer,
    StatsSerializer,
    VerificationReviewRequestSerializer,
)


__all__ = [
    "StatsSerializer",
    "DashboardOrderSerializer",
    "OrderStatusRequestSerializer",
    "SellerUpdateRequestSerializer",
    "VerificationReviewRequestSerializer",
    "SellerDetailSerializer",
    "CommissionSerializer",
    "CommissionUpdateRequestSerializer",
    "ErrorResponseSerializer",
]
