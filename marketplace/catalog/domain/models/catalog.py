import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from marketplace.categories import CATEGORY_CHOICES

DEFAULT_PRODUCT_IMAGE = "https://via.placeholder.com/400x300?text=No+Image"


class Product(models.Model):
    """
    Storefront product.

    ``color_variants`` is a list of ``{"color": "red", "images": [url, ...]}``;
    ``size_variants`` is a list of strings.
    """

    # Basic Information
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(max_length=2000, blank=True)

    # Pricing and Inventory
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    offer_price = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True, validators=[MinValueValidator(0)]
    )
    original_price = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True, validators=[MinValueValidator(0)]
    )
    discount = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    in_stock = models.BooleanField(default=True)
    stock_quantity = models.PositiveIntegerField(default=0)

    # Classification
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    subcategory = models.CharField(max_length=100, blank=True)

    # Variants and Media
    color_variants = models.JSONField(default=list, blank=True)
    size_variants = models.JSONField(default=list, blank=True)
    image = models.URLField(max_length=500, default=DEFAULT_PRODUCT_IMAGE)
    images = models.JSONField(default=list, blank=True)
    video_url = models.URLField(max_length=500, blank=True)

    # Status and Visibility
    is_active = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)

    # Ownership
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_products",
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="updated_products",
    )
    seller = models.ForeignKey(
        "authentication.Seller",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )
    seller_name = models.CharField(max_length=150, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["category", "is_active"]),
            models.Index(fields=["is_active", "-created_at"]),
            models.Index(fields=["created_by"]),
            models.Index(fields=["seller"]),
        ]

    def __str__(self):
        return self.name
