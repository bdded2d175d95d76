from .bulk_upload_views import BulkUploadTemplateView, BulkUploadView
from .media_views import (
    AdminSubcategoryListView,
    BannerDeleteView,
    BannerListCreateView,
    PosterDeleteView,
    PosterListCreateView,
    SubcategoryByCategoryView,
    SubcategoryCreateView,
    SubcategoryDeleteView,
)
from .product_views import (
    AdminProductListView,
    ProductCategoryListView,
    ProductDeleteAllView,
    ProductDeleteView,
    ProductDetailView,
    ProductListCreateView,
    ProductToggleStatusView,
    ProductUpdateView,
    SellerProductListView,
)

__all__ = [
    "AdminProductListView",
    "AdminSubcategoryListView",
    "BannerDeleteView",
    "BannerListCreateView",
    "BulkUploadTemplateView",
    "BulkUploadView",
    "PosterDeleteView",
    "PosterListCreateView",
    "ProductCategoryListView",
    "ProductDeleteAllView",
    "ProductDeleteView",
    "ProductDetailView",
    "ProductListCreateView",
    "ProductToggleStatusView",
    "ProductUpdateView",
    "SellerProductListView",
    "SubcategoryByCategoryView",
    "SubcategoryCreateView",
    "SubcategoryDeleteView",
]
