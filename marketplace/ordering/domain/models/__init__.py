from .commission import DEFAULT_COMMISSION_PERCENT, CategoryCommission
from .order import Order


__all__ = ["Order", "CategoryCommission", "DEFAULT_COMMISSION_PERCENT"]
