from .bulk_upload_service import BulkUploadService
from .catalog_service import CatalogService
from .media_service import MediaService


__all__ = ["CatalogService", "MediaService", "BulkUploadService"]
