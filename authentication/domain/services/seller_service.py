"""
SellerService - seller verification documents and the seller hierarchy.

Verification documents are uploaded to object storage under
``seller_verifications/``; resubmitting resets the seller to ``pending``.
"""

from typing import Any, Callable, Dict, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from authentication.models import Seller, SellerVerification
from infrastructure.storage import StorageException, StorageInterface
from infrastructure.storage.uploads import store_upload
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

User = get_user_model()

PROOF_FIELDS = {
    "id_proof": "id_proof_url",
    "address_proof": "address_proof_url",
    "business_proof": "business_proof_url",
    "bank_proof": "bank_proof_url",
}
VERIFICATION_STATUSES = {"pending", "approved", "rejected"}
TEXT_FIELDS = ("name", "seller_name", "email", "parent_seller_email")


def _hierarchy_level(value) -> Optional[int]:
    """Non-negative integer level, or None when the value is unusable."""
    if isinstance(value, bool):
        return None
    try:
        level = int(value)
    except (TypeError, ValueError):
        return None
    return level if level >= 0 else None


class SellerService(BaseService):
    def __init__(self, storage_getter: Callable[[], StorageInterface]):
        super().__init__()
        self._storage = storage_getter

    @staticmethod
    def find_by_email(email: Optional[str]) -> Optional[Seller]:
        if not email:
            return None
        return (
            Seller.objects.select_related("user", "parent_seller__user")
            .filter(user__email__iexact=email.strip())
            .first()
        )

    @BaseService.log_performance
    def submit_verification(self, email: str, details: Dict[str, Any], files: Dict[str, Any]) -> ServiceResult:
        """
        Store (or replace) a seller's verification submission.

        Args:
            email: Seller account email
            details: ``seller_name``, ``shop_name``, ``phone``
            files: Mapping of proof field name (``id_proof`` ...) to UploadedFile

        Returns:
            ServiceResult with the updated Seller
        """
        if not email:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Email is required")
        seller = self.find_by_email(email)
        if seller is None:
            return service_err(ErrorCodes.SELLER_NOT_FOUND, "Seller not found")

        uploaded_urls = {}
        storage = self._storage()
        for field, url_field in PROOF_FIELDS.items():
            uploaded = files.get(field)
            if not uploaded:
                continue
            try:
                uploaded_urls[url_field] = store_upload(storage, uploaded, "seller_verifications").url
            except StorageException as e:
                self.logger.error(f"Verification upload failed for seller {seller.id}: {e}")
                return service_err(ErrorCodes.INTERNAL_ERROR, "Failed to upload verification documents")

        with transaction.atomic():
            verification, _ = SellerVerification.objects.get_or_create(seller=seller)
            verification.seller_name = details.get("seller_name") or verification.seller_name or seller.seller_name
            verification.shop_name = details.get("shop_name") or verification.shop_name
            verification.phone = details.get("phone") or verification.phone
            verification.email = seller.user.email
            for url_field, url in uploaded_urls.items():
                setattr(verification, url_field, url)
            verification.submitted_at = timezone.now()
            verification.reviewed_at = None
            verification.reviewer_note = ""
            verification.save()

            seller.verification_status = "pending"
            if not seller.registered_on:
                seller.registered_on = timezone.now()
            seller.save(update_fields=["verification_status", "registered_on", "updated_at"])

        self.logger.info(f"Verification submitted for seller {seller.id} ({len(uploaded_urls)} documents)")
        return service_ok(seller)

    def get_verification(self, email: str) -> ServiceResult[Seller]:
        if not email:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Email is required")
        seller = self.find_by_email(email)
        if seller is None:
            return service_err(ErrorCodes.SELLER_NOT_FOUND, "Seller not found")
        return service_ok(seller)

    @staticmethod
    def _find_by_id(seller_id) -> Optional[Seller]:
        try:
            return Seller.objects.select_related("user").filter(pk=seller_id).first()
        except (ValidationError, ValueError):
            return None

    def list_sub_sellers(self, seller: Seller):
        return list(Seller.objects.select_related("user").filter(parent_seller=seller).order_by("-created_at"))

    # ------------------------------------------------------------------
    # Admin management
    # ------------------------------------------------------------------

    def list_sellers(self):
        return list(
            Seller.objects.select_related("user", "parent_seller__user", "verification").order_by("-created_at")
        )

    def get_seller(self, seller_id) -> ServiceResult[Seller]:
        seller = (
            Seller.objects.select_related("user", "parent_seller__user").filter(pk=seller_id).first()
        )
        if seller is None:
            return service_err(ErrorCodes.SELLER_NOT_FOUND, "Seller not found")
        return service_ok(seller)

    def _resolve_parent(self, seller: Seller, data: Dict[str, Any]):
        """Return (found, parent, error) for parent_seller_id / parent_seller_email in ``data``."""
        if "parent_seller_id" in data:
            parent_id = data.get("parent_seller_id")
            parent = self._find_by_id(parent_id) if parent_id else None
            if parent_id and parent is None:
                return True, None, "Parent seller not found"
        elif "parent_seller_email" in data:
            parent_email = data.get("parent_seller_email")
            parent = self.find_by_email(parent_email) if parent_email else None
            if parent_email and parent is None:
                return True, None, "Parent seller not found"
        else:
            return False, None, None

        if parent is not None and parent.pk == seller.pk:
            return True, None, "A seller cannot be its own parent"
        return True, parent, None

    @BaseService.log_performance
    def update_seller(self, seller_id, data: Dict[str, Any]) -> ServiceResult[Seller]:
        result = self.get_seller(seller_id)
        if not result.ok:
            return result
        seller = result.value
        user = seller.user

        for key in TEXT_FIELDS:
            if data.get(key) and not isinstance(data[key], str):
                return service_err(ErrorCodes.VALIDATION_ERROR, f"Invalid {key.replace('_', ' ')}")
        hierarchy_level = data.get("hierarchy_level")
        if hierarchy_level is not None:
            hierarchy_level = _hierarchy_level(hierarchy_level)
            if hierarchy_level is None:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid hierarchy level")

        new_email = (data.get("email") or "").strip().lower()
        if new_email and new_email != user.email:
            if User.objects.filter(email__iexact=new_email).exclude(pk=user.pk).exists():
                return service_err(ErrorCodes.VALIDATION_ERROR, "Email already exists")
            user.email = new_email

        verification_status = data.get("verification_status")
        if verification_status and (
            not isinstance(verification_status, str) or verification_status not in VERIFICATION_STATUSES
        ):
            return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid verification status")

        parent_given, parent, parent_error = self._resolve_parent(seller, data)
        if parent_error:
            return service_err(ErrorCodes.VALIDATION_ERROR, parent_error)

        with transaction.atomic():
            if data.get("name"):
                user.name = data["name"].strip()
            user.save()

            if data.get("seller_name"):
                seller.seller_name = data["seller_name"].strip()
            if parent_given:
                seller.parent_seller = parent
                seller.hierarchy_level = parent.hierarchy_level + 1 if parent else 0
            if hierarchy_level is not None:
                seller.hierarchy_level = hierarchy_level
            if data.get("verification_status"):
                seller.verification_status = data["verification_status"]
            seller.save()

            if any(data.get(key) for key in ("shop_name", "phone", "seller_name")):
                verification, _ = SellerVerification.objects.get_or_create(seller=seller)
                verification.shop_name = data.get("shop_name") or verification.shop_name
                verification.phone = data.get("phone") or verification.phone
                verification.seller_name = data.get("seller_name") or verification.seller_name
                verification.email = user.email
                verification.save()

        self.logger.info(f"Seller {seller.id} updated by admin")
        return service_ok(seller)

    @BaseService.log_performance
    def review_verification(self, seller_id, action: str, note: str = "") -> ServiceResult[Seller]:
        if action not in ("approve", "reject"):
            return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid action. Use approve or reject.")
        result = self.get_seller(seller_id)
        if not result.ok:
            return result
        seller = result.value

        with transaction.atomic():
            seller.verification_status = "approved" if action == "approve" else "rejected"
            seller.save(update_fields=["verification_status", "updated_at"])
            verification, _ = SellerVerification.objects.get_or_create(
                seller=seller, defaults={"email": seller.user.email, "seller_name": seller.seller_name}
            )
            verification.reviewed_at = timezone.now()
            verification.reviewer_note = note or ""
            verification.save(update_fields=["reviewed_at", "reviewer_note"])

        self.logger.info(f"Seller {seller.id} verification {seller.verification_status}")
        return service_ok(seller)
