from .commission_service import CommissionService
from .inventory_service import InventoryService
from .order_service import OrderService


__all__ = ["CommissionService", "InventoryService", "OrderService"]
