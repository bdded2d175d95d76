"""
SMTP Email Service
==================

EmailServiceInterface on top of Django's configured email backend.
"""

import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.utils.html import strip_tags

from .interface import EmailException, EmailMessage, EmailServiceInterface

logger = logging.getLogger(__name__)


class SMTPEmailService(EmailServiceInterface):
    """
    Configuration (in settings.py):
        EMAIL_HOST / EMAIL_PORT: SMTP server (from SMTP_HOST / SMTP_PORT)
        EMAIL_HOST_USER / EMAIL_HOST_PASSWORD: credentials
        EMAIL_USE_TLS / EMAIL_USE_SSL: transport security
        DEFAULT_FROM_EMAIL: sender address
    """

    def __init__(self):
        self.default_from = getattr(settings, "DEFAULT_FROM_EMAIL", "noreply@lmart.local")

    def is_configured(self) -> bool:
        return bool(
            getattr(settings, "EMAIL_HOST", "")
            and getattr(settings, "EMAIL_HOST_USER", "")
            and getattr(settings, "EMAIL_HOST_PASSWORD", "")
        )

    def send(self, message: EmailMessage) -> bool:
        if not message.to:
            logger.warning(f"Email '{message.subject}' has no recipients, skipping")
            return False

        text_body = message.text_body or strip_tags(message.html_body)
        mail = EmailMultiAlternatives(
            subject=message.subject,
            body=text_body,
            from_email=message.from_email or self.default_from,
            to=message.to,
            reply_to=message.reply_to or None,
        )
        if message.html_body:
            mail.attach_alternative(message.html_body, "text/html")

        try:
            sent = mail.send(fail_silently=False) > 0
        except Exception as e:
            logger.error(f"Failed to send email '{message.subject}': {str(e)}")
            raise EmailException(f"Email send failed: {str(e)}") from e

        if sent:
            logger.info(f"Email '{message.subject}' sent to {len(message.to)} recipient(s)")
        else:
            logger.warning(f"Email backend accepted no messages for '{message.subject}'")
        return sent
