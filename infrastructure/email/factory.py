"""
Email Service Factory
======================

Chooses the email backend from ``settings.INFRASTRUCTURE["EMAIL_BACKEND_TYPE"]``.
"""

import logging
from typing import Literal, Optional

from django.conf import settings

from .interface import EmailServiceInterface
from .mock_service import MockEmailService
from .smtp_service import SMTPEmailService

logger = logging.getLogger(__name__)

EmailBackend = Literal["smtp", "mock"]


class EmailFactory:
    @staticmethod
    def create(backend: Optional[EmailBackend] = None) -> EmailServiceInterface:
        """
        Create an email service.

        Raises:
            ValueError: If the backend name is unknown
        """
        infrastructure = getattr(settings, "INFRASTRUCTURE", {})
        backend_type = backend or infrastructure.get("EMAIL_BACKEND_TYPE", "smtp")

        logger.info(f"Creating email service backend: {backend_type}")

        if backend_type == "smtp":
            return SMTPEmailService()
        if backend_type == "mock":
            return MockEmailService()
        raise ValueError(f"Invalid email backend: {backend_type}. Must be 'smtp' or 'mock'")
