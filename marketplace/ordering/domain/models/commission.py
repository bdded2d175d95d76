from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from marketplace.categories import CATEGORY_CHOICES

DEFAULT_COMMISSION_PERCENT = Decimal("2")


class CategoryCommission(models.Model):
    """Platform commission charged on every line item of a category."""

    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, unique=True)
    commission_percent = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=DEFAULT_COMMISSION_PERCENT,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    updated_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"
        ordering = ["category"]

    def __str__(self):
        return f"{self.category}: {self.commission_percent}%"
