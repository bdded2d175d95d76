"""
Prometheus metrics for authentication flows.
"""

from .metrics import login_total, password_reset_requests_total, registrations_total

__all__ = ["login_total", "registrations_total", "password_reset_requests_total"]
