from .auth_serializers import (
    ForgotPasswordRequestSerializer,
    LoginRequestSerializer,
    RegisterRequestSerializer,
    ResetPasswordRequestSerializer,
    SellerRegisterRequestSerializer,
    UserSerializer,
)
from .seller_serializers import (
    ParentSellerSerializer,
    SellerSerializer,
    SellerVerificationSerializer,
    VerificationSubmitSerializer,
)


__all__ = [
    "UserSerializer",
    "RegisterRequestSerializer",
    "SellerRegisterRequestSerializer",
    "LoginRequestSerializer",
    "ForgotPasswordRequestSerializer",
    "ResetPasswordRequestSerializer",
    "SellerSerializer",
    "ParentSellerSerializer",
    "SellerVerificationSerializer",
    "VerificationSubmitSerializer",
]
