"""
Prometheus metrics for authentication flows.
"""

from prometheus_client import Counter

login_total = Counter("auth_login_total", "Login attempts", ["status"])
"""
Labels: status (success, invalid_credentials, seller_pending, seller_rejected)

Example:
    login_total.labels(status="success").inc()
"""

registrations_total = Counter("auth_registrations_total", "Accounts registered", ["role"])

password_reset_requests_total = Counter(
    "auth_password_reset_requests_total", "Password reset requests", ["known_email"]
)
