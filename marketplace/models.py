from marketplace.catalog.domain.models import Banner, Poster, Product, Subcategory
from marketplace.ordering.domain.models import CategoryCommission, Order


__all__ = [
    "Product",
    "Subcategory",
    "Banner",
    "Poster",
    "Order",
    "CategoryCommission",
]
