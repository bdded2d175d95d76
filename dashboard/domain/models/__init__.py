from .earning import AdminEarning, SellerEarning


__all__ = ["AdminEarning", "SellerEarning"]
