"""
CatalogService - Product CRUD & Search

Handles product browsing, admin CRUD and the per-seller product view.
Media (images, video) is uploaded through the storage abstraction.
"""

import math
from typing import Any, Callable, Dict, List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import Q

from authentication.models import Seller
from infrastructure.observability import tracer
from infrastructure.storage import StorageException, StorageInterface
from infrastructure.storage.uploads import store_upload
from marketplace.catalog.domain.models import Product
from marketplace.catalog.domain.services.product_input import (
    build_color_variants,
    parse_color_map,
    parse_decimal,
    parse_flag,
    parse_list,
    variant_colors,
)
from marketplace.categories import is_valid_category, normalize_category
from utils.rbac import ROLE_SELLER, current_role
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

MAX_VIDEO_BYTES = 5 * 1024 * 1024
PRODUCT_IMAGE_FOLDER = "products"
PRODUCT_VIDEO_FOLDER = "product_videos"


def apply_name_search(queryset, search: Optional[str]):
    """Case-insensitive prefix match of the search term's first word on the product name."""
    term = (search or "").strip()
    if not term:
        return queryset
    return queryset.filter(name__istartswith=term.split()[0])


def paginate(queryset, page: int, limit: int) -> Dict[str, Any]:
    total = queryset.count()
    offset = (page - 1) * limit
    return {
        "data": list(queryset[offset : offset + limit]),
        "pagination": {"current": page, "pages": math.ceil(total / limit) if limit else 0, "total": total},
    }


def find_product(product_id) -> Optional[Product]:
    try:
        return Product.objects.select_related("created_by", "seller").filter(pk=product_id).first()
    except (DjangoValidationError, ValueError):
        return None


class CatalogService(BaseService):
    """
    Service for managing product catalog operations.

    Responsibilities:
    - List and search active products (storefront)
    - Create, update, toggle and delete products (admin)
    - Share form parsing and media uploads with the seller portal
    """

    def __init__(self, storage_getter: Callable[[], StorageInterface]):
        """
        Args:
            storage_getter: Returns the storage adapter (injected via DI container)
        """
        super().__init__()
        self._storage = storage_getter

    # ------------------------------------------------------------------
    # Storefront
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def list_products(
        self,
        filters: Optional[Dict[str, Any]] = None,
        page: int = 1,
        limit: int = 50,
    ) -> ServiceResult[Dict[str, Any]]:
        """
        List active products with filtering and pagination.

        Args:
            filters: ``search``, ``featured``, ``in_stock`` (booleans or None) and ``category``
            page: Page number (1-indexed)
            limit: Items per page

        Returns:
            ServiceResult with ``{"data": [...], "pagination": {current, pages, total}}``
        """
        with tracer.start_as_current_span("catalog_list_products") as span:
            filters = filters or {}
            span.set_attribute("page", page)

            queryset = Product.objects.select_related("created_by").filter(is_active=True)
            if filters.get("category"):
                category = normalize_category(filters["category"])
                queryset = queryset.filter(category=category)
                span.set_attribute("filter.category", category)
            queryset = apply_name_search(queryset, filters.get("search"))
            if filters.get("featured") is not None:
                queryset = queryset.filter(is_featured=filters["featured"])
            if filters.get("in_stock") is not None:
                queryset = queryset.filter(in_stock=filters["in_stock"])

            result = paginate(queryset.order_by("-created_at"), page, limit)
            span.set_attribute("result.count", result["pagination"]["total"])
            self.logger.info(f"Listed products: total={result['pagination']['total']}, page={page}")
            return service_ok(result)

    def list_by_category(self, category: str, filters=None, page: int = 1, limit: int = 10):
        filters = dict(filters or {})
        filters["category"] = category
        return self.list_products(filters, page=page, limit=limit)

    def get_product(self, product_id) -> ServiceResult[Product]:
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        return service_ok(product)

    # ------------------------------------------------------------------
    # Form handling shared with the seller portal
    # ------------------------------------------------------------------

    def parse_fields(self, data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
        """
        Validate and convert form fields into model values.

        Raises:
            ValueError: With a client-facing message
        """
        fields: Dict[str, Any] = {}

        if "name" in data or not partial:
            name = (data.get("name") or "").strip()
            if not name:
                raise ValueError("Product name is required")
            if len(name) > 200:
                raise ValueError("Product name cannot exceed 200 characters")
            fields["name"] = name

        if "description" in data:
            description = data.get("description") or ""
            if len(description) > 2000:
                raise ValueError("Description cannot exceed 2000 characters")
            fields["description"] = description

        if "price" in data or not partial:
            price = parse_decimal(data.get("price"))
            if price is None:
                raise ValueError("Price is required")
            if price < 0:
                raise ValueError("Price cannot be negative")
            fields["price"] = price

        for key in ("offer_price", "original_price"):
            if key in data:
                value = parse_decimal(data.get(key))
                if value is not None and value < 0:
                    raise ValueError(f"{key} cannot be negative")
                fields[key] = value

        if "discount" in data and data.get("discount") not in (None, ""):
            discount = parse_decimal(data.get("discount"))
            if discount < 0 or discount > 100:
                raise ValueError("Discount must be between 0 and 100")
            fields["discount"] = discount

        if "category" in data or not partial:
            category = normalize_category(data.get("category"))
            if not is_valid_category(category):
                raise ValueError("Invalid category")
            fields["category"] = category

        if "subcategory" in data:
            fields["subcategory"] = (data.get("subcategory") or "").strip()

        if "size_variants" in data:
            fields["size_variants"] = parse_list(data.get("size_variants"))

        if "stock_quantity" in data and data.get("stock_quantity") not in (None, ""):
            try:
                stock = int(data.get("stock_quantity"))
            except (TypeError, ValueError):
                raise ValueError("Stock quantity must be an integer")
            if stock < 0:
                raise ValueError("Stock quantity cannot be negative")
            fields["stock_quantity"] = stock

        if "in_stock" in data or not partial:
            fields["in_stock"] = parse_flag(data.get("in_stock"), default=True)
        for key in ("is_active", "is_featured"):
            if key in data:
                fields[key] = parse_flag(data.get(key), default=key == "is_active")

        return fields

    def upload_media(self, files: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        """
        Upload ``image``, ``images`` (list) and ``video`` from a request.

        Returns:
            ServiceResult with any of ``image``, ``images``, ``video_url``
        """
        video = files.get("video")
        if video is not None and (getattr(video, "size", 0) or 0) > MAX_VIDEO_BYTES:
            return service_err(ErrorCodes.FILE_TOO_LARGE, "Video size must be 5MB or less")

        storage = self._storage()
        media: Dict[str, Any] = {}
        try:
            if files.get("image") is not None:
                media["image"] = store_upload(storage, files["image"], PRODUCT_IMAGE_FOLDER).url
            extra = [f for f in files.get("images") or [] if f is not None]
            if extra:
                media["images"] = [store_upload(storage, f, PRODUCT_IMAGE_FOLDER).url for f in extra]
            if video is not None:
                media["video_url"] = store_upload(storage, video, PRODUCT_VIDEO_FOLDER).url
        except StorageException as e:
            self.logger.error(f"Product media upload failed: {e}")
            return service_err(ErrorCodes.INTERNAL_ERROR, "Failed to upload product media")
        return service_ok(media)

    @BaseService.log_performance
    def create_product(
        self,
        data: Dict[str, Any],
        files: Dict[str, Any],
        user,
        seller: Optional[Seller] = None,
    ) -> ServiceResult[Product]:
        """
        Create a product from form data and uploaded media.

        Args:
            data: Form fields; list fields accept a JSON array or comma string
            files: ``image``, ``images`` (list), ``video``
            user: Creating user (admin or seller)
            seller: Seller profile to attach (seller portal only)
        """
        try:
            fields = self.parse_fields(data)
        except ValueError as e:
            return service_err(ErrorCodes.VALIDATION_ERROR, str(e))

        media_result = self.upload_media(files)
        if not media_result.ok:
            return media_result
        media = media_result.value

        images = media.get("images", [])
        fields["color_variants"] = build_color_variants(
            parse_list(data.get("color_variants")), images, parse_color_map(data.get("images_color_map"))
        )
        fields.update(media)
        if seller is not None:
            fields["seller"] = seller
            fields["seller_name"] = seller.seller_name

        product = Product.objects.create(created_by=user, **fields)
        self.logger.info(f"Created product: {product.name} (id={product.id}) by {user.pk}")
        return service_ok(product)

    @BaseService.log_performance
    def update_product(self, product_id, data: Dict[str, Any], files: Dict[str, Any], user) -> ServiceResult[Product]:
        """
        Partially update a product.

        New images are appended to the existing ones. Colour variants are
        rebuilt against the final image list when colours or a colour map are
        given (or the product already has colours).
        """
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")

        try:
            fields = self.parse_fields(data, partial=True)
        except ValueError as e:
            return service_err(ErrorCodes.VALIDATION_ERROR, str(e))

        media_result = self.upload_media(files)
        if not media_result.ok:
            return media_result
        media = media_result.value
        if media.get("images"):
            media["images"] = list(product.images or []) + media["images"]
        fields.update(media)

        final_images = fields.get("images", product.images or [])
        if "color_variants" in data:
            colors = parse_list(data.get("color_variants"))
        else:
            colors = variant_colors(product.color_variants)
        color_map = parse_color_map(data.get("images_color_map"))
        if colors or color_map:
            fields["color_variants"] = build_color_variants(colors, final_images, color_map)

        with transaction.atomic():
            for key, value in fields.items():
                setattr(product, key, value)
            product.updated_by = user
            product.save()

        self.logger.info(f"Updated product {product.id}, fields={sorted(fields)}")
        return service_ok(product)

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------

    def delete_product(self, product_id) -> ServiceResult[None]:
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        product.delete()
        self.logger.info(f"Deleted product {product_id}")
        return service_ok(None)

    def toggle_status(self, product_id, user) -> ServiceResult[Product]:
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        product.is_active = not product.is_active
        product.updated_by = user
        product.save(update_fields=["is_active", "updated_by", "updated_at"])
        return service_ok(product)

    def admin_list_products(self, category=None, search=None, page: int = 1, limit: int = 10):
        queryset = Product.objects.select_related("created_by")
        if category and category != "all":
            queryset = queryset.filter(category=normalize_category(category))
        queryset = apply_name_search(queryset, search)
        return service_ok(paginate(queryset.order_by("-created_at"), page, limit))

    def delete_all_products(self) -> ServiceResult[int]:
        deleted_count, _ = Product.objects.all().delete()
        self.logger.warning(f"Deleted all products ({deleted_count})")
        return service_ok(deleted_count)

    @BaseService.log_performance
    def list_seller_products(self, seller_id, user, page: int = 1, limit: int = 50) -> ServiceResult[List[Product]]:
        """
        Products of one seller (by Seller id).

        Admins may view any seller; a seller only their own approved profile.
        """
        try:
            seller = Seller.objects.select_related("user").filter(pk=seller_id).first()
        except (DjangoValidationError, ValueError):
            seller = None
        if seller is None:
            return service_err(ErrorCodes.SELLER_NOT_FOUND, "Seller not found")

        if current_role(user) == ROLE_SELLER:
            own = Seller.objects.filter(user_id=user.pk).first()
            if own is None or own.pk != seller.pk:
                return service_err(ErrorCodes.PERMISSION_DENIED, "Not authorized to view other seller products")
            if own.verification_status != "approved":
                return service_err(ErrorCodes.SELLER_NOT_APPROVED, "Seller not approved by admin yet")

        queryset = (
            Product.objects.select_related("created_by")
            .filter(Q(seller=seller) | Q(created_by_id=seller.user_id))
            .order_by("-created_at")
        )
        offset = (page - 1) * limit
        return service_ok(list(queryset[offset : offset + limit]))


def seller_product_ids(user_id, seller: Optional[Seller] = None) -> set:
    """Ids (as strings) of products created by ``user_id`` or attached to ``seller``."""
    query = Q(created_by_id=user_id)
    if seller is not None:
        query |= Q(seller=seller)
    return {str(pk) for pk in Product.objects.filter(query).values_list("id", flat=True)}
