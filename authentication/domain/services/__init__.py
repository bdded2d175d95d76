"""
Business logic services for authentication.

Services encapsulate business rules and coordinate between
infrastructure (email, storage) and domain models.
"""

from .auth_service import AuthService
from .seller_service import SellerService


__all__ = [
    "AuthService",
    "SellerService",
]
