"""
Mock Email Service
==================

Records outbound email in memory instead of sending it.
"""

import logging
from typing import List, Optional

from .interface import EmailException, EmailMessage, EmailServiceInterface

logger = logging.getLogger(__name__)


class MockEmailService(EmailServiceInterface):
    """
    Used by tests and local development.

    ``sent_messages`` holds everything "sent"; set ``fail_sends`` to make
    ``send`` raise like a broken SMTP server would.
    """

    def __init__(self, configured: bool = True):
        self.sent_messages: List[EmailMessage] = []
        self.configured = configured
        self.fail_sends = False

    def is_configured(self) -> bool:
        return self.configured

    def send(self, message: EmailMessage) -> bool:
        if self.fail_sends:
            raise EmailException("Mock SMTP failure")
        logger.info(f"[MOCK EMAIL] To: {message.to}, Subject: {message.subject}")
        self.sent_messages.append(message)
        return True

    def clear_sent_messages(self):
        self.sent_messages.clear()
        self.fail_sends = False

    def get_last_message(self) -> Optional[EmailMessage]:
        return self.sent_messages[-1] if self.sent_messages else None

    def messages_to(self, address: str) -> List[EmailMessage]:
        return [m for m in self.sent_messages if address in m.to]
