"""SMTP email sender.

Messages are sent through an SMTP relay as multipart/alternative with a
plain-text part and an optional HTML part.
"""

from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib
import logfire

from portal.adapter.error import EmailDeliveryError
from portal.config import EmailSettings
from portal.domain.service import EmailMessage, EmailSender


class SmtpEmailSender(EmailSender):
    """EmailSender backed by an SMTP relay."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize sender.

        Args:
            settings: SMTP relay configuration
        """
        self.settings = settings

    def _build(self, message: EmailMessage) -> MIMEMultipart:
        mime = MIMEMultipart("alternative")
        mime["From"] = f"{self.settings.from_name} <{self.settings.from_address}>"
        mime["To"] = message.to
        mime["Subject"] = message.subject

        mime.attach(MIMEText(message.text, "plain"))
        if message.html:
            mime.attach(MIMEText(message.html, "html"))
        return mime

    async def send(self, message: EmailMessage) -> None:
        """Send a message through the relay.

        Raises:
            EmailDeliveryError: If the relay rejects or cannot be reached
        """
        with logfire.span("smtp.send", subject=message.subject):
            try:
                await aiosmtplib.send(
                    self._build(message),
                    hostname=self.settings.smtp_host,
                    port=self.settings.smtp_port,
                    username=self.settings.username,
                    password=self.settings.password,
                    start_tls=self.settings.use_tls,
                    timeout=self.settings.timeout_seconds,
                )
            except (aiosmtplib.SMTPException, OSError) as e:
                raise EmailDeliveryError(f"SMTP delivery failed: {e}") from e


class MockEmailSender(EmailSender):
    """Mock sender for testing.

    Records messages in ``outbox`` instead of sending them. With ``fail``
    set, every send raises like an unreachable relay.
    """

    def __init__(self, fail: bool = False) -> None:
        self.outbox: list[EmailMessage] = []
        self.fail = fail

    async def send(self, message: EmailMessage) -> None:
        if self.fail:
            raise EmailDeliveryError("Mock relay unavailable")
        self.outbox.append(message)
