"""
Role gates for API views.

Roles are re-read from the database on every check; token claims are only used
to identify the user.
"""

from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.permissions import BasePermission

from authentication.models import Seller
from utils.rbac import ROLE_ADMIN, ROLE_SELLER, current_role


class RoleRequired(BasePermission):
    required_role = None
    message = "Access denied"

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        if user is None or not getattr(user, "is_authenticated", False):
            return False
        if self.required_role is None:
            return True
        return current_role(user) == self.required_role


class AdminRequired(RoleRequired):
    required_role = ROLE_ADMIN
    message = "Admin access required"


class SellerRequired(RoleRequired):
    required_role = ROLE_SELLER
    message = "Seller access required"


class ApprovedSellerRequired(SellerRequired):
    """
    Seller role plus an approved seller profile.

    The profile is attached to the request as ``request.seller``.
    """

    def has_permission(self, request, view) -> bool:
        if not super().has_permission(request, view):
            return False
        seller = Seller.objects.select_related("user").filter(user_id=request.user.pk).first()
        if seller is None:
            raise NotFound("Seller profile not found")
        if seller.verification_status != "approved":
            raise PermissionDenied("Seller not approved by admin yet")
        request.seller = seller
        return True
