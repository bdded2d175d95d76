"""
Notification Celery Tasks

- Outbound email delivery (all transactional mail goes through here)
- Hourly purge of expired notifications
"""

import logging

from celery import shared_task

from infrastructure.email import EmailException, EmailMessage

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3, queue="email_tasks")
def send_email_task(self, subject, to, html_body, text_body=""):
    """
    Deliver one email through the configured email backend.

    Args:
        subject (str): Subject line
        to (list[str]): Recipients
        html_body (str): Rendered HTML
        text_body (str): Optional plain-text alternative

    Returns:
        dict: ``{"success": bool, "recipients": int}``
    """
    from infrastructure.container import container

    email_service = container.email()
    if not email_service.is_configured():
        logger.warning(f"Email not configured; dropping '{subject}'")
        return {"success": False, "recipients": 0}

    try:
        sent = email_service.send(EmailMessage(subject=subject, to=list(to), html_body=html_body, text_body=text_body))
        return {"success": sent, "recipients": len(to)}
    except EmailException as exc:
        logger.error(f"Email '{subject}' failed (attempt {self.request.retries + 1}): {exc}")
        raise self.retry(exc=exc, countdown=60 * (2**self.request.retries))


@shared_task(bind=True, queue="maintenance_tasks")
def purge_expired_notifications_task(self):
    """Delete notifications whose ``expires_at`` is in the past."""
    from infrastructure.container import container

    deleted = container.notification_service().purge_expired()
    logger.info(f"Purged {deleted} expired notifications")
    return {"deleted_count": deleted}
