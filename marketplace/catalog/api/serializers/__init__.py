from .bulk_upload_serializers import BulkUploadRequestSerializer, BulkUploadResponseSerializer
from .media_serializers import (
    BannerCreateSerializer,
    BannerSerializer,
    PosterCreateSerializer,
    PosterSerializer,
    SubcategoryCreateSerializer,
    SubcategorySerializer,
)
from .product_serializers import (
    PaginationSerializer,
    ProductFormSerializer,
    ProductListResponseSerializer,
    ProductSerializer,
)

__all__ = [
    "BannerCreateSerializer",
    "BannerSerializer",
    "BulkUploadRequestSerializer",
    "BulkUploadResponseSerializer",
    "PaginationSerializer",
    "PosterCreateSerializer",
    "PosterSerializer",
    "ProductFormSerializer",
    "ProductListResponseSerializer",
    "ProductSerializer",
    "SubcategoryCreateSerializer",
    "SubcategorySerializer",
]
