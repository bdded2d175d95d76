from .seller import Seller, SellerVerification
from .user import CustomUser

__all__ = [
    "CustomUser",
    "Seller",
    "SellerVerification",
]
