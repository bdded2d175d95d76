import uuid

from django.conf import settings
from django.db import models

from marketplace.categories import CATEGORY_CHOICES


class Subcategory(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    image_url = models.URLField(max_length=500, blank=True)
    image_key = models.CharField(max_length=500, blank=True)
    is_active = models.BooleanField(default=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"
        ordering = ["name"]
        constraints = [models.UniqueConstraint(fields=["category", "name"], name="unique_subcategory_per_category")]

    def __str__(self):
        return f"{self.category}/{self.name}"


class Banner(models.Model):
    """Home page banner, optionally linking to a product (its category is copied)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, blank=True)
    image_title = models.CharField(max_length=200, blank=True)
    image_url = models.URLField(max_length=500)
    storage_key = models.CharField(max_length=500, blank=True)
    category = models.CharField(max_length=20, blank=True)
    product = models.ForeignKey(
        "marketplace.Product", on_delete=models.SET_NULL, null=True, blank=True, related_name="banners"
    )
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name or self.image_title or str(self.id)


class Poster(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200, blank=True)
    image_url = models.URLField(max_length=500)
    storage_key = models.CharField(max_length=500, blank=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title or str(self.id)
