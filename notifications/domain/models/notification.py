import uuid

from django.db import models


class Notification(models.Model):
    """In-app notification for admins, sellers or users."""

    TYPE_CHOICES = [
        ("info", "Info"),
        ("success", "Success"),
        ("warning", "Warning"),
        ("error", "Error"),
        ("order", "Order"),
        ("seller", "Seller"),
        ("product", "Product"),
    ]
    PRIORITY_CHOICES = [
        ("low", "Low"),
        ("medium", "Medium"),
        ("high", "High"),
        ("urgent", "Urgent"),
    ]
    RECIPIENT_CHOICES = [
        ("admin", "Admin"),
        ("seller", "Seller"),
        ("user", "User"),
        ("all", "All"),
    ]
    ENTITY_CHOICES = [
        ("order", "Order"),
        ("product", "Product"),
        ("seller", "Seller"),
        ("user", "User"),
        ("payment", "Payment"),
    ]
    CREATOR_CHOICES = [
        ("User", "User"),
        ("Seller", "Seller"),
        ("Admin", "Admin"),
        ("System", "System"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    message = models.TextField(max_length=1000)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default="info")
    priority = models.CharField(max_length=20, choices=PRIORITY_CHOICES, default="medium")
    is_read = models.BooleanField(default=False)
    recipient_type = models.CharField(max_length=20, choices=RECIPIENT_CHOICES, default="admin")
    recipient_id = models.CharField(max_length=64, blank=True, null=True)
    related_entity_type = models.CharField(max_length=20, choices=ENTITY_CHOICES, blank=True, null=True)
    related_entity_id = models.CharField(max_length=64, blank=True, null=True)
    action_url = models.CharField(max_length=500, blank=True, null=True)
    metadata = models.JSONField(default=dict, blank=True)
    expires_at = models.DateTimeField(blank=True, null=True)
    created_by = models.CharField(max_length=64, blank=True, null=True)
    created_by_model = models.CharField(max_length=20, choices=CREATOR_CHOICES, default="System")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "notifications"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["recipient_type", "recipient_id", "is_read"]),
            models.Index(fields=["expires_at"]),
        ]

    def __str__(self):
        return f"[{self.type}] {self.title}"
