import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models


class Order(models.Model):
    """
    Storefront order with its line items embedded as JSON.

    Each item: ``product_id``, ``name``, ``quantity``, ``price``, ``size``,
    ``color``, ``image``, ``commission_percent``, ``commission_amount``,
    ``seller_payout_amount``.
    """

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("processing", "Processing"),
        ("shipped", "Shipped"),
        ("delivered", "Delivered"),
        ("cancelled", "Cancelled"),
    ]
    STATUSES = tuple(value for value, _ in STATUS_CHOICES)
    CANCELLABLE_STATUSES = ("pending", "processing")

    PAYMENT_STATUS_CHOICES = [
        ("pending", "Pending"),
        ("completed", "Completed"),
        ("failed", "Failed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_id = models.CharField(max_length=100, unique=True)
    payment_id = models.CharField(max_length=100, unique=True, null=True, blank=True)
    gateway_order_id = models.CharField(max_length=100, blank=True)

    # Customer snapshot
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="orders"
    )
    customer_name = models.CharField(max_length=100)
    customer_email = models.EmailField(max_length=100, blank=True)
    customer_phone = models.CharField(max_length=15, blank=True)
    customer_address = models.CharField(max_length=500, blank=True)
    customer_city = models.CharField(max_length=100, blank=True)
    customer_pincode = models.CharField(max_length=10, blank=True)

    total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending")
    payment_status = models.CharField(max_length=20, choices=PAYMENT_STATUS_CHOICES, default="pending")
    payment_date = models.DateTimeField(null=True, blank=True)
    items = models.JSONField(default=list, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["customer_email"]),
            models.Index(fields=["status"]),
        ]

    @property
    def product_ids(self):
        return {str(item.get("product_id")) for item in self.items or [] if item.get("product_id")}

    def __str__(self):
        return f"Order {self.order_id} ({self.customer_name})"
