from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import CustomUser, Seller, SellerVerification


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    list_display = ("email", "name", "role", "order_count", "total_spent", "is_active", "created_at")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("email", "name")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at", "last_login", "login_count")

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Profile", {"fields": ("name", "role")}),
        ("Counters", {"fields": ("order_count", "total_spent", "login_count")}),
        ("Permissions", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Timestamps", {"fields": ("last_login", "created_at", "updated_at"), "classes": ("collapse",)}),
    )
    add_fieldsets = (
        (None, {"classes": ("wide",), "fields": ("email", "name", "role", "password1", "password2")}),
    )


class SellerVerificationInline(admin.StackedInline):
    model = SellerVerification
    extra = 0
    readonly_fields = ("submitted_at", "reviewed_at")


@admin.register(Seller)
class SellerAdmin(admin.ModelAdmin):
    list_display = ("seller_name", "user", "verification_status", "hierarchy_level", "parent_seller", "created_at")
    list_filter = ("verification_status", "hierarchy_level")
    search_fields = ("seller_name", "user__email", "user__name")
    raw_id_fields = ("user", "parent_seller")
    inlines = [SellerVerificationInline]
