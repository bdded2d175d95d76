import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models


class Seller(models.Model):
    """
    Seller profile for a user with role ``seller``.

    Sellers form a hierarchy through ``parent_seller``; ``hierarchy_level`` is
    the parent's level plus one (0 for top-level sellers).
    """

    VERIFICATION_CHOICES = [
        ("pending", "Pending"),
        ("approved", "Approved"),
        ("rejected", "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="seller_profile")
    seller_name = models.CharField(max_length=150, blank=True)
    parent_seller = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sub_sellers",
    )
    hierarchy_level = models.PositiveIntegerField(default=0)
    order_count = models.PositiveIntegerField(default=0)
    total_revenue = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    verification_status = models.CharField(max_length=20, choices=VERIFICATION_CHOICES, default="pending")
    registered_on = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]
        indexes = [models.Index(fields=["verification_status"])]

    @property
    def email(self):
        return self.user.email

    @property
    def name(self):
        return self.user.name

    @property
    def is_approved(self):
        return self.verification_status == "approved"

    def __str__(self):
        return f"{self.seller_name or self.user.name} <{self.user.email}>"


class SellerVerification(models.Model):
    """Documents and shop details a seller submits for admin review."""

    seller = models.OneToOneField(Seller, on_delete=models.CASCADE, related_name="verification")
    seller_name = models.CharField(max_length=150, blank=True)
    shop_name = models.CharField(max_length=200, blank=True)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=20, blank=True)
    id_proof_url = models.URLField(max_length=500, blank=True)
    address_proof_url = models.URLField(max_length=500, blank=True)
    business_proof_url = models.URLField(max_length=500, blank=True)
    bank_proof_url = models.URLField(max_length=500, blank=True)
    submitted_at = models.DateTimeField(null=True, blank=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)
    reviewer_note = models.TextField(blank=True)

    class Meta:
        app_label = "authentication"

    def __str__(self):
        return f"Verification for {self.seller_id}"
