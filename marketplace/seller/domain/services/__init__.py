from .seller_portal_service import SellerPortalService

__all__ = ["SellerPortalService"]
