"""
Email Service Interface
========================

Contract for transactional email (password resets, order and seller alerts).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class EmailMessage:
    """
    An outbound email.

    Attributes:
        subject: Subject line
        to: Recipient addresses
        html_body: Rendered HTML body
        text_body: Plain-text alternative
        from_email: Sender, defaults to DEFAULT_FROM_EMAIL
        reply_to: Optional reply-to addresses
    """

    subject: str
    to: List[str]
    html_body: str = ""
    text_body: str = ""
    from_email: Optional[str] = None
    reply_to: List[str] = field(default_factory=list)


class EmailServiceInterface(ABC):
    """
    Implementations:
        - SMTPEmailService: Django's SMTP email backend
        - MockEmailService: records messages in memory
    """

    @abstractmethod
    def send(self, message: EmailMessage) -> bool:
        """
        Deliver ``message``.

        Raises:
            EmailException: If delivery fails
        """

    @abstractmethod
    def is_configured(self) -> bool:
        """True when the backend can actually deliver mail."""

    def send_html(self, subject: str, html_content: str, to: List[str], text_content: str = "") -> bool:
        return self.send(EmailMessage(subject=subject, to=to, html_body=html_content, text_body=text_content))


class EmailException(Exception):
    """Raised when an email cannot be delivered."""
