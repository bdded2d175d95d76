from authentication.domain.models.seller import Seller, SellerVerification
from authentication.domain.models.user import CustomUser


__all__ = [
    "CustomUser",
    "Seller",
    "SellerVerification",
]
