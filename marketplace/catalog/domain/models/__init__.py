from .catalog import DEFAULT_PRODUCT_IMAGE, Product
from .media import Banner, Poster, Subcategory


__all__ = ["Product", "DEFAULT_PRODUCT_IMAGE", "Subcategory", "Banner", "Poster"]
