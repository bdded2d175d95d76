from dashboard.domain.models import AdminEarning, SellerEarning


__all__ = ["AdminEarning", "SellerEarning"]
