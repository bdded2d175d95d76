from .dashboard_service import DashboardService
from .earnings_service import EarningsService

__all__ = ["DashboardService", "EarningsService"]
