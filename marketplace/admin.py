from django.contrib import admin
from django.utils.html import format_html

from .models import Banner, CategoryCommission, Order, Poster, Product, Subcategory


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "subcategory", "price", "stock_quantity", "in_stock", "is_active", "seller_name")
    list_filter = ("category", "is_active", "in_stock", "is_featured", "created_at")
    search_fields = ("name", "description", "seller_name", "subcategory")
    readonly_fields = ("id", "created_at", "updated_at", "image_preview")

    fieldsets = (
        (None, {"fields": ("id", "name", "description", "category", "subcategory")}),
        ("Pricing", {"fields": ("price", "offer_price", "original_price", "discount")}),
        ("Inventory", {"fields": ("stock_quantity", "in_stock", "is_active", "is_featured")}),
        ("Media", {"fields": ("image", "image_preview", "images", "video_url", "color_variants", "size_variants")}),
        ("Ownership", {"fields": ("seller", "seller_name", "created_by", "updated_by")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )

    def image_preview(self, obj):
        if obj.image:
            return format_html('<img src="{}" width="100" height="100" />', obj.image)
        return "No Image"

    image_preview.short_description = "Preview"


@admin.register(Subcategory)
class SubcategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "is_active", "created_at")
    list_filter = ("category",)
    search_fields = ("name",)


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ("name", "image_title", "category", "product", "created_at")
    list_filter = ("category",)


@admin.register(Poster)
class PosterAdmin(admin.ModelAdmin):
    list_display = ("title", "created_at")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("order_id", "customer_name", "customer_email", "total", "status", "payment_status", "created_at")
    list_filter = ("status", "payment_status", "created_at")
    search_fields = ("order_id", "payment_id", "customer_name", "customer_email", "customer_phone")
    readonly_fields = ("id", "order_id", "payment_id", "gateway_order_id", "items", "created_at", "updated_at")
    date_hierarchy = "created_at"


@admin.register(CategoryCommission)
class CategoryCommissionAdmin(admin.ModelAdmin):
    list_display = ("category", "commission_percent", "updated_by", "updated_at")
