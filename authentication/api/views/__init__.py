from .auth_views import (
    ForgotPasswordAPIView,
    LoginAPIView,
    MeAPIView,
    RegisterAPIView,
    ResetPasswordAPIView,
    SellerRegisterAPIView,
)
from .seller_views import SellerVerificationView, SubSellerListView


__all__ = [
    "RegisterAPIView",
    "SellerRegisterAPIView",
    "LoginAPIView",
    "ForgotPasswordAPIView",
    "ResetPasswordAPIView",
    "MeAPIView",
    "SellerVerificationView",
    "SubSellerListView",
]
