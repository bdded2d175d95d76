"""
MailerService - renders transactional emails and hands them to Celery.

Every send is best-effort: rendering or queueing failures are logged and
reported as ``False``; they never propagate to the calling request.
"""

from typing import Callable, List

from django.conf import settings
from django.template.loader import render_to_string

from infrastructure.email import EmailServiceInterface
from utils.formatting import format_inr
from utils.service_base import BaseService

ORDER_STATUS_COPY = {
    "pending": ("⏳", "Your order is pending"),
    "processing": ("🔄", "Your order is being processed"),
    "shipped": ("🚚", "Your order has been shipped"),
    "delivered": ("✅", "Your order has been delivered"),
    "cancelled": ("❌", "Your order has been cancelled"),
}


class MailerService(BaseService):
    def __init__(self, email_service_getter: Callable[[], EmailServiceInterface]):
        super().__init__()
        self._email_service = email_service_getter

    def is_configured(self) -> bool:
        return self._email_service().is_configured()

    def _dispatch(self, subject: str, to: List[str], template: str, context: dict) -> bool:
        recipients = [address for address in to if address]
        if not recipients:
            self.logger.warning(f"No recipients for '{subject}', skipping")
            return False
        try:
            html_body = render_to_string(template, context)
            from notifications.tasks import send_email_task

            send_email_task.delay(subject, recipients, html_body)
            return True
        except Exception as e:
            self.logger.error(f"Failed to queue email '{subject}': {e}", exc_info=True)
            return False

    @staticmethod
    def _admin_recipients() -> List[str]:
        return [getattr(settings, "ADMIN_NOTIFICATION_EMAIL", "")]

    def send_password_reset(self, user, reset_url: str) -> bool:
        return self._dispatch(
            "Reset your L-Mart password",
            [user.email],
            "notifications/emails/password_reset.html",
            {
                "name": user.name,
                "reset_url": reset_url,
                "expires_minutes": getattr(settings, "PASSWORD_RESET_TOKEN_MINUTES", 30),
            },
        )

    def send_new_seller_alert(self, seller) -> bool:
        return self._dispatch(
            "New Seller Registration - Action Required",
            self._admin_recipients(),
            "notifications/emails/new_seller_admin.html",
            {"seller": seller, "dashboard_url": f"{settings.FRONTEND_URL}/admin/sellers"},
        )

    def send_new_order_alert(self, order) -> bool:
        return self._dispatch(
            f"New Order Received - {order.order_id} ({format_inr(order.total)})",
            self._admin_recipients(),
            "notifications/emails/new_order_admin.html",
            {"order": order, "dashboard_url": f"{settings.FRONTEND_URL}/admin/orders/{order.order_id}"},
        )

    def send_order_status_update(self, order, previous_status: str) -> bool:
        emoji, text = ORDER_STATUS_COPY.get(order.status, ("📦", "Your order was updated"))
        return self._dispatch(
            f"Order {order.status.capitalize()} - {order.order_id}",
            [order.customer_email],
            "notifications/emails/order_status_update.html",
            {
                "order": order,
                "previous_status": previous_status,
                "status_emoji": emoji,
                "status_text": text,
            },
        )
