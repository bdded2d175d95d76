"""
MediaService - subcategories, home page banners and posters.

Images live in object storage; the storage key is kept next to the URL so the
object can be removed when the record is deleted. Storage clean-up is
best-effort.
"""

import uuid
from typing import Callable, List, Optional

from django.db import IntegrityError, transaction

from infrastructure.storage import StorageException, StorageInterface
from infrastructure.storage.uploads import store_upload
from marketplace.catalog.domain.models import Banner, Poster, Product, Subcategory
from marketplace.categories import is_valid_category, normalize_category
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


class MediaService(BaseService):
    def __init__(self, storage_getter: Callable[[], StorageInterface]):
        super().__init__()
        self._storage = storage_getter

    def _remove_object(self, key: Optional[str]) -> None:
        if not key:
            return
        try:
            self._storage().delete(key)
        except StorageException as e:
            self.logger.warning(f"Failed to delete stored object {key}: {e}")

    # ------------------------------------------------------------------
    # Subcategories
    # ------------------------------------------------------------------

    def list_subcategories(self, category: str) -> List[Subcategory]:
        return list(
            Subcategory.objects.filter(category=normalize_category(category), is_active=True).order_by("name")
        )

    def admin_list_subcategories(self) -> List[Subcategory]:
        return list(Subcategory.objects.all().order_by("category", "name"))

    @BaseService.log_performance
    def create_subcategory(self, name: str, category: str, image=None, user=None) -> ServiceResult[Subcategory]:
        """
        Create a subcategory; a failed image upload does not block creation.
        """
        name = (name or "").strip()
        category = normalize_category(category)
        if not name or not category:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Name and category are required")
        if not is_valid_category(category):
            return service_err(ErrorCodes.INVALID_CATEGORY, "Invalid category")
        if Subcategory.objects.filter(category=category, name__iexact=name).exists():
            return service_err(ErrorCodes.CONFLICT, "Subcategory already exists for this category")

        image_url, image_key = "", ""
        if image is not None:
            try:
                stored = store_upload(self._storage(), image, "subcategories")
                image_url, image_key = stored.url, stored.key
            except StorageException as e:
                self.logger.warning(f"Subcategory image upload failed, continuing without image: {e}")

        try:
            with transaction.atomic():
                subcategory = Subcategory.objects.create(
                    name=name, category=category, image_url=image_url, image_key=image_key, created_by=user
                )
        except IntegrityError:
            self._remove_object(image_key)
            return service_err(ErrorCodes.CONFLICT, "Subcategory already exists for this category")

        self.logger.info(f"Created subcategory {category}/{name}")
        return service_ok(subcategory)

    def delete_subcategory(self, subcategory_id) -> ServiceResult[Subcategory]:
        subcategory = self._get(Subcategory, subcategory_id)
        if subcategory is None:
            return service_err(ErrorCodes.NOT_FOUND, "Subcategory not found")
        self._remove_object(subcategory.image_key)
        subcategory.delete()
        return service_ok(subcategory)

    # ------------------------------------------------------------------
    # Banners
    # ------------------------------------------------------------------

    def list_banners(self, product_id: Optional[str] = None) -> List[Banner]:
        queryset = Banner.objects.select_related("product").order_by("-created_at")
        if product_id:
            try:
                uuid.UUID(str(product_id))
            except ValueError:
                return []
            queryset = queryset.filter(product_id=product_id)
        return list(queryset)

    @BaseService.log_performance
    def create_banner(self, image, name: str = "", image_title: str = "", product_id=None, user=None):
        if image is None:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Image upload failed")

        product = None
        if product_id:
            try:
                uuid.UUID(str(product_id))
            except ValueError:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid product_id")
            product = Product.objects.filter(pk=product_id).only("id", "category").first()
            if product is None:
                return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found for provided product_id")

        try:
            stored = store_upload(self._storage(), image, "banners")
        except StorageException as e:
            self.logger.error(f"Banner upload failed: {e}")
            return service_err(ErrorCodes.VALIDATION_ERROR, "Image upload failed")

        banner = Banner.objects.create(
            name=name or "",
            image_title=image_title or "",
            image_url=stored.url,
            storage_key=stored.key,
            category=product.category if product else "",
            product=product,
            created_by=user,
        )
        return service_ok(banner)

    def delete_banner(self, banner_id) -> ServiceResult[None]:
        banner = self._get(Banner, banner_id)
        if banner is None:
            return service_err(ErrorCodes.NOT_FOUND, "Banner not found")
        self._remove_object(banner.storage_key)
        banner.delete()
        return service_ok(None)

    # ------------------------------------------------------------------
    # Posters
    # ------------------------------------------------------------------

    def list_posters(self) -> List[Poster]:
        return list(Poster.objects.order_by("-created_at"))

    def create_poster(self, image, title: str = "", user=None) -> ServiceResult[Poster]:
        if image is None:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Image upload failed")
        try:
            stored = store_upload(self._storage(), image, "posters")
        except StorageException as e:
            self.logger.error(f"Poster upload failed: {e}")
            return service_err(ErrorCodes.VALIDATION_ERROR, "Image upload failed")
        poster = Poster.objects.create(title=title or "", image_url=stored.url, storage_key=stored.key, created_by=user)
        return service_ok(poster)

    def delete_poster(self, poster_id) -> ServiceResult[None]:
        poster = self._get(Poster, poster_id)
        if poster is None:
            return service_err(ErrorCodes.NOT_FOUND, "Poster not found")
        self._remove_object(poster.storage_key)
        poster.delete()
        return service_ok(None)

    @staticmethod
    def _get(model, pk):
        try:
            uuid.UUID(str(pk))
        except ValueError:
            return None
        return model.objects.filter(pk=pk).first()
