import uuid

from django.db import models


class EarningSnapshot(models.Model):
    """
    Result of one earnings computation.

    ``params``: ``{weeks, months, years}``; ``totals``: ``{earned, upcoming,
    cancelled, orders_count}``; ``breakdown``: one entry per period bucket.
    """

    RANGE_CHOICES = [
        ("week", "Week"),
        ("month", "Month"),
        ("year", "Year"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    range = models.CharField(max_length=10, choices=RANGE_CHOICES, default="month")
    params = models.JSONField(default=dict)
    totals = models.JSONField(default=dict)
    breakdown = models.JSONField(default=list)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]


class AdminEarning(EarningSnapshot):
    class Meta(EarningSnapshot.Meta):
        app_label = "dashboard"


class SellerEarning(EarningSnapshot):
    seller = models.ForeignKey("authentication.Seller", on_delete=models.CASCADE, related_name="earning_snapshots")

    class Meta(EarningSnapshot.Meta):
        app_label = "dashboard"
